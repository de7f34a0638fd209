"""Graph normalizer — turns object graphs into resource documents.

The normalizer:
- Validates every reachable object against its type descriptor
- Splits each object into a resource (attributes) and relationship references
- Walks the graph breadth-first, emitting each (type, id) exactly once
"""
