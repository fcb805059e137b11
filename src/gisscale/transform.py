from __future__ import annotations

from dataclasses import dataclass

from .model import BoundingBox, Point

DEFAULT_BORDER = 15


@dataclass(frozen=True, slots=True)
class ScaleContext:
    """Linear map from data space to device space.

    Device y grows downwards, so the vertical axis is flipped around
    ``height``.
    """

    offset_x: float
    offset_y: float
    scale: float
    height: float

    def forward(self, pt: Point) -> Point:
        return (
            (pt[0] - self.offset_x) * self.scale,
            self.height - (pt[1] - self.offset_y) * self.scale,
        )

    def backward(self, pt: Point) -> Point:
        return (
            pt[0] / self.scale + self.offset_x,
            (self.height - pt[1]) / self.scale + self.offset_y,
        )


def get_transform(box: BoundingBox, width: float, height: float, border: float = DEFAULT_BORDER) -> ScaleContext:
    plot_w, plot_h = width - 2 * border, height - 2 * border
    if plot_w <= 0 or plot_h <= 0:
        raise ValueError(f"target {width}x{height} leaves no room inside a {border}px border")
    ratio = max(box.width / plot_w, box.height / plot_h)
    if ratio == 0:
        # single point: keep data units as pixels
        ratio = 1.0
    cx, cy = (box.min_x + box.max_x) * 0.5, (box.min_y + box.max_y) * 0.5
    return ScaleContext(
        offset_x=cx - (plot_w * 0.5 + border) * ratio,
        offset_y=cy - (plot_h * 0.5 + border) * ratio,
        scale=1.0 / ratio,
        height=height,
    )
