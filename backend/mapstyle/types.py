from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal


class SymbolizerKind(str, Enum):
    line = "LineSymbolizer"
    polygon = "PolygonSymbolizer"
    point = "PointSymbolizer"


@dataclass(frozen=True)
class SymbolizerParam:
    kind: SymbolizerKind
    param: str


# kind -> {param: value}, in first-encounter order.
SymbolizerGroups = dict[SymbolizerKind, dict[str, Any]]


@dataclass(frozen=True)
class MarkerReference:
    """
    Where a point feature's icon comes from.

    - kind="url": an explicit `marker-url`, fetched by the caller
    - kind="pin": a computed pin id (e.g. `pin-l-airport+3388ff`) rendered by the caller
    `file` is the path the style points the renderer at.
    """

    kind: Literal["url", "pin"]
    resource: str
    file: str


@dataclass(frozen=True)
class CompiledStyle:
    markup: str
    resources: list[str] = field(default_factory=list)
    marker: MarkerReference | None = None


@dataclass(frozen=True)
class CompiledFeature:
    style: str
    layer: str | None
    resources: list[str]
    marker: MarkerReference | None = None


@dataclass(frozen=True)
class MapnikDocument:
    """
    A compiled stylesheet plus the resources that must exist on disk before it
    is handed to the renderer.

    `markers` holds one reference per point feature, in feature order; the
    url/pin split tells the caller what to download and what to render.
    """

    xml: str
    resources: list[str]
    markers: list[MarkerReference] = field(default_factory=list)

    @property
    def remote_markers(self) -> list[MarkerReference]:
        return [m for m in self.markers if m.kind == "url"]

    @property
    def pin_markers(self) -> list[MarkerReference]:
        return [m for m in self.markers if m.kind == "pin"]
