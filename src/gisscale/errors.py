from __future__ import annotations


class GisScaleError(ValueError):
    pass


class MalformedTokenError(GisScaleError):
    """A coordinate token that cannot be read as an ``x y`` pair."""

    def __init__(self, token: str, reason: str = "invalid coordinate token"):
        self.token = token
        self.reason = reason
        super().__init__(f"{reason}: {token!r}")


class UnsupportedGeometryError(GisScaleError):
    def __init__(self, wkt: str):
        self.wkt = wkt
        super().__init__(f"unsupported or malformed geometry: {wkt[:60]!r}")
