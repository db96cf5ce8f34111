"""Classic algorithm exercises: arrays, searching, backtracking, dynamic programming and binary trees."""

__version__ = "0.1.0"