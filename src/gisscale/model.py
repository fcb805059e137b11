from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class BoundingBox:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def from_point(cls, x: float, y: float) -> "BoundingBox":
        return cls(x, x, y, y)

    def expand(self, x: float, y: float) -> "BoundingBox":
        return BoundingBox(
            min(self.min_x, x),
            max(self.max_x, x),
            min(self.min_y, y),
            max(self.max_y, y),
        )

    def union(self, other: Optional["BoundingBox"]) -> "BoundingBox":
        if other is None:
            return self
        return BoundingBox(
            min(self.min_x, other.min_x),
            max(self.max_x, other.max_x),
            min(self.min_y, other.min_y),
            max(self.max_y, other.max_y),
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def corners(self) -> tuple[Point, Point]:
        # (lower-left, upper-right)
        return (self.min_x, self.min_y), (self.max_x, self.max_y)


EmptyHook = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class ExtractOptions:
    """Knobs for :func:`gisscale.points.extract_scaled_points`.

    ``warn_on_empty`` logs a warning whenever a token with an empty
    coordinate is replaced by the origin; ``on_empty`` is called with the
    offending token in the same situation.
    """

    warn_on_empty: bool = True
    on_empty: Optional[EmptyHook] = None


def expand_box(box: Optional[BoundingBox], x: float, y: float) -> BoundingBox:
    if box is None:
        return BoundingBox.from_point(x, y)
    return box.expand(x, y)
