"""
Data Package

Tree construction and grouping for flat record lists.
"""

from .records import MISSING
from .tree_builder import CyclicStructureError, build_tree, flatten_tree, iter_tree
from .grouping import group_by

# Alias for callers used to the handleTree name
handle_tree = build_tree

__all__ = [
    "MISSING",
    "CyclicStructureError",
    "build_tree",
    "handle_tree",
    "flatten_tree",
    "iter_tree",
    "group_by",
]
