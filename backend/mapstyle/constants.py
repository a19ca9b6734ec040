from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from mapstyle.types import SymbolizerKind, SymbolizerParam


# Spherical Mercator, meters.
PROJ = (
    "+proj=merc +a=6378137 +b=6378137 +lat_ts=0.0 +lon_0=0.0 +x_0=0.0 +y_0=0.0 "
    "+k=1.0 +units=m +nadgrids=@null +wktext +no_defs +over"
)
WGS84 = "+proj=longlat +ellps=WGS84 +datum=WGS84 +no_defs"

HEADER = '<?xml version="1.0" encoding="utf-8"?>' + '<Map srs="' + PROJ + '">'
FOOTER = "</Map>"


# simplestyle property -> (symbolizer element, attribute)
STYLE_MAP: Mapping[str, SymbolizerParam] = MappingProxyType(
    {
        "stroke": SymbolizerParam(SymbolizerKind.line, "stroke"),
        "stroke-opacity": SymbolizerParam(SymbolizerKind.line, "stroke-opacity"),
        "stroke-width": SymbolizerParam(SymbolizerKind.line, "stroke-width"),
        "fill": SymbolizerParam(SymbolizerKind.polygon, "fill"),
        "fill-opacity": SymbolizerParam(SymbolizerKind.polygon, "opacity"),
    }
)

DEFAULT_FILLED: Mapping[str, Any] = MappingProxyType(
    {
        "fill": "#555555",
        "fill-opacity": 0.5,
    }
)

DEFAULT_STROKED: Mapping[str, Any] = MappingProxyType(
    {
        "stroke": "#555555",
        "stroke-width": 2,
        "stroke-opacity": 1,
    }
)

TYPED_DEFAULTS: Mapping[str, Mapping[str, Any]] = MappingProxyType(
    {
        "LineString": DEFAULT_STROKED,
        "MultiLineString": DEFAULT_STROKED,
        "Polygon": DEFAULT_FILLED,
        "MultiPolygon": DEFAULT_FILLED,
    }
)

DEFAULT_MARKER_SIZE = "medium"
DEFAULT_MARKER_COLOR = "7e7e7e"
