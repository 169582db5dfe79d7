"""Directory traversal with name-based filtering.

This package provides the filesystem accessor, the tree node type and the tree
builder that walks a directory, classifies its entries and produces either node
structures or console output.
"""
