"""Classic algorithms and data structures: sorting, searching, linked lists,
trees, heaps, dynamic programming, greedy methods and graph algorithms."""

__version__ = "0.1.0"