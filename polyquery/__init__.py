"""Query areas, vertex counts, rectangles and intersections of integer polygons."""

__version__ = "0.1.0"
__all__ = ["geometry", "parser", "cli"]