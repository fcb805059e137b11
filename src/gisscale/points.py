"""Point-set parsing: bounding boxes and scaled point lists.

A point set is the coordinate body of a WKT shape, e.g. ``"1 2,3 4,5 6"``.
Tokens are split on a single space and are not trimmed first, so
``"1 2, 3 4"`` has an empty x in its second token.
"""
from __future__ import annotations

import logging
import re
from typing import Optional, Union

from .errors import MalformedTokenError
from .model import BoundingBox, ExtractOptions, Point, expand_box
from .transform import ScaleContext

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = ExtractOptions()

# plain decimal or exponent notation; no nan, inf or digit separators
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


def _coordinate(text: str, token: str) -> float:
    text = text.strip()
    if not _NUMBER_RE.match(text):
        raise MalformedTokenError(token)
    return float(text)


def parse_point(token: str) -> Point:
    coords = token.split(" ")
    if len(coords) < 2:
        raise MalformedTokenError(token, "missing y coordinate")
    return _coordinate(coords[0], token), _coordinate(coords[1], token)


def compute_bounding_box(point_set: str, existing: Optional[BoundingBox] = None) -> BoundingBox:
    box = existing
    for token in point_set.split(","):
        x, y = parse_point(token)
        box = expand_box(box, x, y)
    assert box is not None
    return box


def extract_scaled_points(
    point_set: str,
    scale: Optional[ScaleContext] = None,
    linear: bool = False,
    options: Optional[ExtractOptions] = None,
) -> Union[list[Point], list[float]]:
    """Parse ``point_set`` and map every point through ``scale``.

    Parentheses inside tokens are ignored. A token whose x or y is missing
    or blank becomes ``(0.0, 0.0)`` instead of failing; that recovery is
    reported through ``options`` but never raised. With ``linear`` the
    result is flat ``[x0, y0, x1, y1, ...]``.
    """
    opts = options or _DEFAULT_OPTIONS
    out: list = []
    for token in point_set.split(","):
        coords = token.replace("(", "").replace(")", "").split(" ")
        if len(coords) < 2 or not coords[0].strip() or not coords[1].strip():
            if opts.warn_on_empty:
                logger.warning("Empty coordinate in token %r, using the origin", token)
            if opts.on_empty is not None:
                opts.on_empty(token)
            x, y = 0.0, 0.0
        else:
            pt = (_coordinate(coords[0], token), _coordinate(coords[1], token))
            x, y = scale.forward(pt) if scale is not None else pt

        if linear:
            out.append(x)
            out.append(y)
        else:
            out.append((x, y))
    return out
