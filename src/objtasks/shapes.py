"""Rectangle factory with a computed area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width/height pair.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.get_area()
        200
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
