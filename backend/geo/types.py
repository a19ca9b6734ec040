from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal


GeometryType = Literal[
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
]

GEOMETRY_TYPES: frozenset[str] = frozenset(
    (
        "Point",
        "MultiPoint",
        "LineString",
        "MultiLineString",
        "Polygon",
        "MultiPolygon",
        "GeometryCollection",
    )
)

POINT_TYPES: frozenset[str] = frozenset(("Point", "MultiPoint"))


@dataclass(frozen=True)
class Feature:
    # Raw GeoJSON geometry mapping, kept exactly as received (None when absent).
    geometry: dict[str, Any] | None
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def geometry_type(self) -> GeometryType | None:
        if not self.geometry:
            return None
        return self.geometry.get("type")


@dataclass(frozen=True)
class FeatureCollection:
    """
    Canonical, ordered GeoJSON input.

    Order matters: a feature's position is its style/layer index and later
    features render on top.
    """

    features: list[Feature]

    def __len__(self) -> int:
        return len(self.features)
