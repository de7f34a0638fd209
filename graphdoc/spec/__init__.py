"""Schema configuration files for graphdoc.

This package loads type descriptors from YAML or JSON and checks them in two
gates before a registry is built:
1. Schema — JSON Schema for structural validation
2. Validator — semantic checks the schema cannot express (duplicate types,
   overlapping or reserved field names)
"""

SCHEMA_FORMAT_VERSION = "1.0"
