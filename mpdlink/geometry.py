"""Rectangular screen areas and how they relate to one another."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    """The axis along which an area is split."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Point:
    """A cell position on the screen."""

    x: int = 0
    y: int = 0

    def distance(self, other: Point) -> int:
        """Manhattan distance to ``other``."""
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass
class Geometry:
    """An area that can be carved into chunks from its top-left corner."""

    x: int
    y: int
    width: int
    height: int
    taken_size_horiz: int = 0
    taken_size_vert: int = 0

    def top_left_dist(self, other: Geometry) -> int:
        """Distance between the top-left corners of both areas."""
        return self.top_left().distance(other.top_left())

    def take_chunk(self, direction: Direction, percent: int) -> Geometry:
        """Take the next ``percent`` of this area along ``direction``."""
        if percent < 0:
            raise ValueError("percent must not be negative")
        if direction is Direction.HORIZONTAL:
            size = self.width * percent // 100
            result = Geometry(self.x + self.taken_size_horiz, self.y, size, self.height)
            self.taken_size_horiz += size
        else:
            size = self.height * percent // 100
            result = Geometry(self.x, self.y + self.taken_size_vert, self.width, size)
            self.taken_size_vert += size
        return result

    def middle(self) -> Point:
        """The centre cell of the area."""
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    def top_left(self) -> Point:
        """The top-left cell of the area."""
        return Point(self.x, self.y)

    def take_remainder(self) -> Geometry:
        """Take whatever has not been taken yet; the area is then used up."""
        result = Geometry(
            self.x + self.taken_size_horiz,
            self.y + self.taken_size_vert,
            self.width - self.taken_size_horiz,
            self.height - self.taken_size_vert,
        )
        self.taken_size_horiz = self.width
        self.taken_size_vert = self.height
        return result

    def _overlaps_horizontally(self, other: Geometry) -> bool:
        return self.x + self.width > other.x and other.x + other.width > self.x

    def _overlaps_vertically(self, other: Geometry) -> bool:
        return self.y + self.height > other.y and other.y + other.height > self.y

    def is_directly_above(self, other: Geometry) -> bool:
        """Whether this area lies above ``other`` and shares columns with it."""
        return self._overlaps_horizontally(other) and other.middle().y >= self.middle().y

    def is_directly_below(self, other: Geometry) -> bool:
        """Whether this area lies below ``other`` and shares columns with it."""
        return self._overlaps_horizontally(other) and other.middle().y <= self.middle().y

    def is_directly_right(self, other: Geometry) -> bool:
        """Whether this area lies right of ``other`` and shares rows with it."""
        return self._overlaps_vertically(other) and other.middle().x <= self.middle().x

    def is_directly_left(self, other: Geometry) -> bool:
        """Whether this area lies left of ``other`` and shares rows with it."""
        return self._overlaps_vertically(other) and other.middle().x >= self.middle().x