"""
jsondelta version constants.

This module defines the library version and the version tag of the
serialized diff-tree format emitted by ``DiffNode.to_dict`` and the CLI.
"""

# Library version (matches pyproject.toml)
JSONDELTA_VERSION = "0.1.0"

# Schema version for serialized diff trees
# Increment when the to_dict() layout changes in a breaking way
DIFF_SCHEMA_VERSION = "diff_tree_v1"
