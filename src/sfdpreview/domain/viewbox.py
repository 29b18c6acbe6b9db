"""Axis-aligned view frames in font units."""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ViewBox:
    """An axis-aligned box stored by its min and max corners.

    The public tuple form is ``(min_x, min_y, width, height)``, matching the
    SVG ``viewBox`` attribute.

    Attributes:
        min_x: Smallest x coordinate
        min_y: Smallest y coordinate
        max_x: Largest x coordinate
        max_y: Largest y coordinate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def empty(cls) -> "ViewBox":
        """Return the identity element for merging (an inverted infinite box)."""
        return cls(math.inf, math.inf, -math.inf, -math.inf)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def is_empty(self) -> bool:
        """Check if the box has not accumulated any point yet."""
        return self.min_x > self.max_x or self.min_y > self.max_y

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Convert to ``(min_x, min_y, width, height)``."""
        return (self.min_x, self.min_y, self.width, self.height)

    def as_bounds(self) -> tuple[float, float, float, float]:
        """Convert to ``(min_x, min_y, max_x, max_y)``."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def corners(self) -> list[tuple[float, float]]:
        """Return the four corners, counter-clockwise from the min corner."""
        return [
            (self.min_x, self.min_y),
            (self.max_x, self.min_y),
            (self.max_x, self.max_y),
            (self.min_x, self.max_y),
        ]
