"""Low level WKT text handling: splitting bodies and writing shapes back."""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Mapping

from .errors import UnsupportedGeometryError


class GeometryKind(str, Enum):
    POINT = "POINT"
    MULTIPOINT = "MULTIPOINT"
    LINESTRING = "LINESTRING"
    MULTILINESTRING = "MULTILINESTRING"
    POLYGON = "POLYGON"
    MULTIPOLYGON = "MULTIPOLYGON"
    GEOMETRYCOLLECTION = "GEOMETRYCOLLECTION"


_SHAPE_RE = re.compile(r"^\s*([A-Za-z]+)\s*\((.*)\)\s*$", re.S)

# smallest number of points/parts a writable shape may have
MIN_LINE_POINTS = 2
MIN_RING_POINTS = 4
MIN_PARTS = 1


def as_kind(kind: GeometryKind | str) -> GeometryKind:
    if isinstance(kind, GeometryKind):
        return kind
    try:
        return GeometryKind(kind.upper())
    except ValueError:
        raise UnsupportedGeometryError(kind) from None


def split_kind(wkt: str) -> tuple[GeometryKind, str]:
    m = _SHAPE_RE.match(wkt)
    if m is None:
        raise UnsupportedGeometryError(wkt)
    return as_kind(m.group(1)), m.group(2).strip()


def split_members(text: str) -> list[str]:
    """Split ``text`` on the commas that sit outside any parentheses."""
    out: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise UnsupportedGeometryError(text)
        elif ch == "," and depth == 0:
            out.append(text[start:i].strip())
            start = i + 1
    if depth != 0:
        raise UnsupportedGeometryError(text)
    tail = text[start:].strip()
    if tail or out:
        out.append(tail)
    return out


def split_groups(text: str) -> list[str]:
    """Contents of each top level ``(...)`` group: ``"(a),(b)"`` -> ``["a", "b"]``."""
    groups = []
    for member in split_members(text):
        if not (member.startswith("(") and member.endswith(")")):
            raise UnsupportedGeometryError(text)
        groups.append(member[1:-1].strip())
    return groups


def format_coordinate(value: Any, empty: str = "") -> str:
    if value is None:
        return empty
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return empty
        try:
            value = float(value)
        except ValueError:
            return empty
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _count(params: Mapping, key: str, minimum: int) -> int:
    try:
        n = int(params.get(key, 0))
    except (TypeError, ValueError):
        n = 0
    return max(n, minimum)


def _write_point(params: Mapping | None, empty: str) -> str:
    params = params or {}
    return f"{format_coordinate(params.get('x'), empty)} {format_coordinate(params.get('y'), empty)}"


def _write_points(params: Mapping | None, minimum: int, empty: str) -> str:
    params = params or {}
    n = _count(params, "no_of_points", minimum)
    return ",".join(_write_point(params.get(i), empty) for i in range(n))


def _write_rings(params: Mapping | None, minimum_points: int, empty: str) -> str:
    params = params or {}
    n = _count(params, "no_of_lines", MIN_PARTS)
    return ",".join(f"({_write_points(params.get(i), minimum_points, empty)})" for i in range(n))


def write_wkt(kind: GeometryKind | str, params: Mapping | None, empty: str = "") -> str:
    """Build WKT for ``kind`` from editor parameters.

    Missing coordinates are written as ``empty``; point, line and polygon
    counts below the minimum for the kind are raised to that minimum.
    """
    kind = as_kind(kind)
    params = params or {}
    if kind is GeometryKind.POINT:
        body = _write_point(params, empty)
    elif kind is GeometryKind.MULTIPOINT:
        body = _write_points(params, MIN_PARTS, empty)
    elif kind is GeometryKind.LINESTRING:
        body = _write_points(params, MIN_LINE_POINTS, empty)
    elif kind is GeometryKind.MULTILINESTRING:
        body = _write_rings(params, MIN_LINE_POINTS, empty)
    elif kind is GeometryKind.POLYGON:
        body = _write_rings(params, MIN_RING_POINTS, empty)
    elif kind is GeometryKind.MULTIPOLYGON:
        n = _count(params, "no_of_polygons", MIN_PARTS)
        body = ",".join(f"({_write_rings(params.get(i), MIN_RING_POINTS, empty)})" for i in range(n))
    else:
        n = _count(params, "geom_count", MIN_PARTS)
        members = []
        for i in range(n):
            member = params.get(i) or {}
            sub_kind = as_kind(member.get("gis_type", GeometryKind.POINT))
            members.append(write_wkt(sub_kind, member.get(sub_kind.value), empty))
        body = ",".join(members)
    return f"{kind.value}({body})"
