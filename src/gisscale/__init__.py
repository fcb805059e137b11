from .api import prepare_rows, scale_row, scale_rows
from .errors import GisScaleError, MalformedTokenError, UnsupportedGeometryError
from .model import BoundingBox, ExtractOptions, Point
from .params import generate_params, generate_wkt, parse_wkt_and_srid
from .points import compute_bounding_box, extract_scaled_points
from .shapes import Shape, parse_wkt
from .transform import ScaleContext, get_transform
from .wkt import GeometryKind

__all__ = [
    "prepare_rows",
    "scale_row",
    "scale_rows",
    "GisScaleError",
    "MalformedTokenError",
    "UnsupportedGeometryError",
    "BoundingBox",
    "ExtractOptions",
    "Point",
    "generate_params",
    "generate_wkt",
    "parse_wkt_and_srid",
    "compute_bounding_box",
    "extract_scaled_points",
    "Shape",
    "parse_wkt",
    "ScaleContext",
    "get_transform",
    "GeometryKind",
]
