"""Shape domain."""

from .shapes import Circle, Rectangle, Shape, Square, total_area

__all__ = ['Shape', 'Rectangle', 'Square', 'Circle', 'total_area']
