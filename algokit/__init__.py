"""Classic algorithms on arrays, searching, dynamic programming, graphs, grids and trees."""

__version__ = "0.1.0"