"""Small data structures, CSV tools and the console programs built on them."""

__version__ = "0.1.0"

__all__ = [
    "bstree",
    "console",
    "csv_table",
    "diagonal_sort",
    "float_list",
    "float_stack",
    "language_report",
    "min_heap",
    "numbers_app",
    "reservations",
    "ring_queue",
    "sorted_map",
    "storage",
    "tree_report",
]