"""Type registry — the schema layer the normalizer resolves types against.

The registry provides:
- Declaration: one descriptor per type name, with ordered attribute and
  relationship fields
- Lookup: O(1) resolution by type name
- Immutability: built once, never mutated, safe to share between calls
"""
