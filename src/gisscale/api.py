from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .errors import UnsupportedGeometryError
from .model import BoundingBox, ExtractOptions
from .params import parse_wkt_and_srid
from .shapes import Shape, parse_wkt
from .transform import DEFAULT_BORDER, ScaleContext, get_transform

logger = logging.getLogger(__name__)


def _parse_value(value: str) -> Shape:
    _, wkt = parse_wkt_and_srid(value.strip())
    return parse_wkt(wkt)


def _parse_values(values: Iterable[Optional[str]]) -> list[Shape]:
    shapes = []
    for value in values:
        if not value:
            logger.debug("Skipping empty spatial value")
            continue
        try:
            shapes.append(_parse_value(value))
        except UnsupportedGeometryError:
            logger.debug("Skipping unsupported spatial value %.60r", value)
    return shapes


def scale_row(value: str, existing: Optional[BoundingBox] = None) -> Optional[BoundingBox]:
    return _parse_value(value).bounds(existing)


def scale_rows(values: Iterable[Optional[str]]) -> Optional[BoundingBox]:
    box = None
    for shape in _parse_values(values):
        box = shape.bounds(box)
    return box


def prepare_rows(
    values: Iterable[Optional[str]],
    width: float,
    height: float,
    *,
    border: float = DEFAULT_BORDER,
    options: Optional[ExtractOptions] = None,
) -> tuple[Optional[ScaleContext], list[Any]]:
    shapes = _parse_values(values)
    box = None
    for shape in shapes:
        box = shape.bounds(box)
    if box is None:
        return None, []
    scale = get_transform(box, width, height, border)
    return scale, [shape.scaled(scale, options) for shape in shapes]
