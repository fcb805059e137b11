from __future__ import annotations

from typing import Sequence

from predicates import orient2d

from .model import Point


def ring_area(ring: Sequence[Point]) -> float:
    """Signed shoelace area; positive for counter-clockwise rings."""
    n = len(ring)
    if n < 3:
        return 0.0
    acc = 0.0
    for i in range(n):
        x0, y0 = ring[i]
        x1, y1 = ring[(i + 1) % n]
        acc += x0 * y1 - x1 * y0
    return acc * 0.5


def is_outer_ring(ring: Sequence[Point]) -> bool:
    # clockwise rings are exteriors
    return ring_area(ring) < 0


def winding_number(pt: Point, ring: Sequence[Point]) -> int:
    pt = (float(pt[0]), float(pt[1]))
    wn = 0
    n = len(ring)
    for i in range(n):
        a = ring[i]
        b = ring[(i + 1) % n]
        if a[1] <= pt[1]:
            if b[1] > pt[1] and orient2d(a, b, pt) > 0:
                wn += 1
        elif b[1] <= pt[1] and orient2d(a, b, pt) < 0:
            wn -= 1
    return wn


def point_in_ring(pt: Point, ring: Sequence[Point]) -> bool:
    return winding_number(pt, ring) != 0
