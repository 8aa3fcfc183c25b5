"""
Search module for astgraph.

Path search over program graphs using multi-path pruning.
"""

from astgraph.search.pruning import find_path, multi_path_pruning

__all__ = [
    "find_path",
    "multi_path_pruning",
]
