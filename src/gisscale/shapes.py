"""Geometry variants.

Every WKT kind is one small dataclass holding the raw point sets of the
shape. They share no base class; the :class:`Shape` protocol is the whole
contract and :data:`PARSERS` is the single dispatch table.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol

from .model import BoundingBox, ExtractOptions, Point
from .points import compute_bounding_box, extract_scaled_points
from .rings import is_outer_ring, point_in_ring
from .transform import ScaleContext
from .wkt import GeometryKind, split_groups, split_kind, split_members, write_wkt

logger = logging.getLogger(__name__)


class Shape(Protocol):
    kind: GeometryKind

    def bounds(self, existing: Optional[BoundingBox] = None) -> Optional[BoundingBox]: ...

    def scaled(self, scale: Optional[ScaleContext] = None, options: Optional[ExtractOptions] = None) -> Any: ...

    def coordinate_params(self) -> dict: ...

    def to_wkt(self) -> str: ...


def _bounds(point_set: str, existing: Optional[BoundingBox]) -> Optional[BoundingBox]:
    # empty bodies such as POINT() bound nothing
    if not point_set.strip():
        return existing
    return compute_bounding_box(point_set, existing)


def _fold(point_sets: list[str], existing: Optional[BoundingBox]) -> Optional[BoundingBox]:
    box = existing
    for ps in point_sets:
        box = _bounds(ps, box)
    return box


def _point_params(pt: Point) -> dict:
    return {"x": pt[0], "y": pt[1]}


def _points_params(point_set: str) -> dict:
    pts = extract_scaled_points(point_set)
    params: dict = {"no_of_points": len(pts)}
    for i, pt in enumerate(pts):
        params[i] = _point_params(pt)
    return params


def _rings_params(rings: list[str]) -> dict:
    params: dict = {"no_of_lines": len(rings)}
    for i, ring in enumerate(rings):
        params[i] = _points_params(ring)
    return params


@dataclass(slots=True)
class PointGeometry:
    point: str
    kind: GeometryKind = field(default=GeometryKind.POINT, init=False)

    def bounds(self, existing: Optional[BoundingBox] = None) -> Optional[BoundingBox]:
        return _bounds(self.point, existing)

    def scaled(self, scale: Optional[ScaleContext] = None, options: Optional[ExtractOptions] = None) -> Point:
        return extract_scaled_points(self.point, scale, options=options)[0]

    def coordinate_params(self) -> dict:
        return _point_params(extract_scaled_points(self.point)[0])

    def to_wkt(self) -> str:
        return write_wkt(self.kind, self.coordinate_params())


@dataclass(slots=True)
class MultiPointGeometry:
    points: str
    kind: GeometryKind = field(default=GeometryKind.MULTIPOINT, init=False)

    def bounds(self, existing: Optional[BoundingBox] = None) -> Optional[BoundingBox]:
        return _bounds(self.points, existing)

    def scaled(self, scale: Optional[ScaleContext] = None, options: Optional[ExtractOptions] = None) -> list[Point]:
        return extract_scaled_points(self.points, scale, options=options)

    def coordinate_params(self) -> dict:
        return _points_params(self.points)

    def to_wkt(self) -> str:
        return write_wkt(self.kind, self.coordinate_params())


@dataclass(slots=True)
class LineStringGeometry:
    points: str
    kind: GeometryKind = field(default=GeometryKind.LINESTRING, init=False)

    def bounds(self, existing: Optional[BoundingBox] = None) -> Optional[BoundingBox]:
        return _bounds(self.points, existing)

    def scaled(self, scale: Optional[ScaleContext] = None, options: Optional[ExtractOptions] = None) -> list[Point]:
        return extract_scaled_points(self.points, scale, options=options)

    def coordinate_params(self) -> dict:
        return _points_params(self.points)

    def to_wkt(self) -> str:
        return write_wkt(self.kind, self.coordinate_params())


@dataclass(slots=True)
class MultiLineStringGeometry:
    lines: list[str]
    kind: GeometryKind = field(default=GeometryKind.MULTILINESTRING, init=False)

    def bounds(self, existing: Optional[BoundingBox] = None) -> Optional[BoundingBox]:
        return _fold(self.lines, existing)

    def scaled(self, scale: Optional[ScaleContext] = None, options: Optional[ExtractOptions] = None) -> list[list[Point]]:
        return [extract_scaled_points(line, scale, options=options) for line in self.lines]

    def coordinate_params(self) -> dict:
        return _rings_params(self.lines)

    def to_wkt(self) -> str:
        return write_wkt(self.kind, self.coordinate_params())


@dataclass(slots=True)
class PolygonGeometry:
    """Polygon as its rings; the first ring is the exterior."""

    rings: list[str]
    kind: GeometryKind = field(default=GeometryKind.POLYGON, init=False)

    def bounds(self, existing: Optional[BoundingBox] = None) -> Optional[BoundingBox]:
        # holes lie inside the exterior, it alone bounds the polygon
        return _fold(self.rings[:1], existing)

    def scaled(self, scale: Optional[ScaleContext] = None, options: Optional[ExtractOptions] = None) -> list[list[Point]]:
        return [extract_scaled_points(ring, scale, options=options) for ring in self.rings]

    def coordinate_params(self) -> dict:
        return _rings_params(self.rings)

    def to_wkt(self) -> str:
        return write_wkt(self.kind, self.coordinate_params())

    def contains(self, pt: Point) -> bool:
        if not self.rings:
            return False
        exterior, *holes = self.scaled()
        if not point_in_ring(pt, exterior):
            return False
        return not any(point_in_ring(pt, hole) for hole in holes)

    def outer_rings(self) -> list[list[Point]]:
        return [ring for ring in self.scaled() if is_outer_ring(ring)]


@dataclass(slots=True)
class MultiPolygonGeometry:
    polygons: list[PolygonGeometry]
    kind: GeometryKind = field(default=GeometryKind.MULTIPOLYGON, init=False)

    def bounds(self, existing: Optional[BoundingBox] = None) -> Optional[BoundingBox]:
        box = existing
        for polygon in self.polygons:
            box = polygon.bounds(box)
        return box

    def scaled(self, scale: Optional[ScaleContext] = None, options: Optional[ExtractOptions] = None) -> list[list[list[Point]]]:
        return [polygon.scaled(scale, options) for polygon in self.polygons]

    def coordinate_params(self) -> dict:
        params: dict = {"no_of_polygons": len(self.polygons)}
        for i, polygon in enumerate(self.polygons):
            params[i] = polygon.coordinate_params()
        return params

    def to_wkt(self) -> str:
        return write_wkt(self.kind, self.coordinate_params())

    def contains(self, pt: Point) -> bool:
        return any(polygon.contains(pt) for polygon in self.polygons)


@dataclass(slots=True)
class GeometryCollection:
    members: list[Shape]
    kind: GeometryKind = field(default=GeometryKind.GEOMETRYCOLLECTION, init=False)

    def bounds(self, existing: Optional[BoundingBox] = None) -> Optional[BoundingBox]:
        box = existing
        for member in self.members:
            box = member.bounds(box)
        return box

    def scaled(self, scale: Optional[ScaleContext] = None, options: Optional[ExtractOptions] = None) -> list:
        return [member.scaled(scale, options) for member in self.members]

    def coordinate_params(self) -> dict:
        params: dict = {"geom_count": len(self.members)}
        for i, member in enumerate(self.members):
            params[i] = {"gis_type": member.kind.value, member.kind.value: member.coordinate_params()}
        return params

    def to_wkt(self) -> str:
        return write_wkt(self.kind, self.coordinate_params())


def _point_set(body: str) -> str:
    # WKT allows blanks after commas, point sets do not
    return ",".join(token.strip() for token in body.split(","))


def _point_sets(body: str) -> list[str]:
    return [_point_set(group) for group in split_groups(body)]


def _parse_polygon(body: str) -> PolygonGeometry:
    return PolygonGeometry(_point_sets(body))


def _parse_collection(body: str) -> GeometryCollection:
    return GeometryCollection([parse_wkt(member) for member in split_members(body)])


PARSERS: dict[GeometryKind, Callable[[str], Shape]] = {
    GeometryKind.POINT: lambda body: PointGeometry(_point_set(body)),
    GeometryKind.MULTIPOINT: lambda body: MultiPointGeometry(_point_set(body.replace("(", "").replace(")", ""))),
    GeometryKind.LINESTRING: lambda body: LineStringGeometry(_point_set(body)),
    GeometryKind.MULTILINESTRING: lambda body: MultiLineStringGeometry(_point_sets(body)),
    GeometryKind.POLYGON: _parse_polygon,
    GeometryKind.MULTIPOLYGON: lambda body: MultiPolygonGeometry([_parse_polygon(p) for p in split_groups(body)]),
    GeometryKind.GEOMETRYCOLLECTION: _parse_collection,
}


def parse_wkt(wkt: str) -> Shape:
    kind, body = split_kind(wkt)
    shape = PARSERS[kind](body)
    logger.debug("Parsed %s with body of %d chars", kind.value, len(body))
    return shape
