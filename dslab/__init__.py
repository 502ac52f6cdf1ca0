"""Binary search tree maps, a circular queue and small algorithm exercises."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "bst_map",
    "change_data",
    "circular_queue",
    "diameter",
    "imbalance",
    "leaf_depth",
    "leaves",
    "optimal",
    "queries",
    "same_tree",
    "subtree",
    "unary",
]