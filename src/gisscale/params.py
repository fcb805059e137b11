"""Editor parameters for spatial column values.

A column value is either bare WKT or ``'<WKT>',<srid>``.
"""
from __future__ import annotations

import re
from typing import Mapping

from .shapes import parse_wkt
from .wkt import GeometryKind, write_wkt

_KINDS = "|".join(kind.value for kind in GeometryKind)
_WITH_SRID_RE = re.compile(rf"^'({_KINDS})\(.*\)',[0-9]*$", re.I | re.S)
_BARE_RE = re.compile(rf"^({_KINDS})\(.*\)$", re.I | re.S)


def parse_wkt_and_srid(value: str) -> tuple[int, str]:
    if _WITH_SRID_RE.match(value):
        last_comma = value.rindex(",")
        srid_text = value[last_comma + 1 :].strip()
        return (int(srid_text) if srid_text else 0), value[1 : last_comma - 1].strip()
    if _BARE_RE.match(value):
        return 0, value
    return 0, ""


def generate_params(value: str) -> dict:
    srid, wkt = parse_wkt_and_srid(value)
    shape = parse_wkt(wkt)
    return {"srid": srid, 0: {shape.kind.value: shape.coordinate_params()}}


def generate_wkt(params: Mapping, index: int = 0, empty: str = "") -> str:
    """Inverse of :func:`generate_params` for entry ``index``."""
    entry = params.get(index) or {}
    if not entry:
        raise ValueError(f"no geometry at index {index}")
    kind = next(iter(entry))
    return write_wkt(kind, entry[kind], empty)
