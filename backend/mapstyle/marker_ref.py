from __future__ import annotations

from typing import Any, Mapping

from geo.types import POINT_TYPES, Feature
from mapstyle.constants import DEFAULT_MARKER_COLOR, DEFAULT_MARKER_SIZE
from mapstyle.markup import to_str
from mapstyle.types import MarkerReference


def marker_string(props: Mapping[str, Any]) -> str:
    """
    Pin id for a simplestyle marker: `pin-<size initial>[-<symbol>]+<color>`.

    >>> marker_string({"marker-size": "large", "marker-symbol": "airport", "marker-color": "#3388ff"})
    'pin-l-airport+3388ff'
    """
    size = to_str(props.get("marker-size") or DEFAULT_MARKER_SIZE)
    symbol = props.get("marker-symbol")
    symbol = f"-{to_str(symbol)}" if symbol else ""
    color = to_str(props.get("marker-color") or DEFAULT_MARKER_COLOR)
    if color.startswith("#"):
        color = color[1:]
    return f"pin-{size[:1]}{symbol}+{color}"


def marker_url(props: Mapping[str, Any]) -> str | None:
    url = props.get("marker-url")
    return to_str(url) if url else None


def marker_reference(feature: Feature, base_path: str) -> MarkerReference | None:
    if feature.geometry_type not in POINT_TYPES:
        return None

    props = feature.properties or {}
    url = marker_url(props)
    if url:
        # The caller swaps this placeholder for wherever it stored the download.
        return MarkerReference(kind="url", resource=url, file=f"{base_path}{url}")

    pin = marker_string(props)
    return MarkerReference(kind="pin", resource=pin, file=f"{base_path}/{pin}.png")
