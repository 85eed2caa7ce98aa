"""Classic algorithms and data structures: divide and conquer, dynamic
programming, greedy methods, backtracking, balanced trees and shortest paths."""

__version__ = "0.1.0"