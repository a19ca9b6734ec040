from __future__ import annotations

from typing import Any, Mapping

from geo.types import Feature
from mapstyle.constants import STYLE_MAP, TYPED_DEFAULTS
from mapstyle.types import SymbolizerGroups


def fallback(own: Mapping[str, Any], defaults: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge `defaults` under `own`.

    Only keys missing from `own` are filled; an explicit None/False is kept.
    """
    out = dict(own)
    for k, v in defaults.items():
        if k not in out:
            out[k] = v
    return out


def resolve_properties(feature: Feature) -> dict[str, Any]:
    defaults = TYPED_DEFAULTS.get(feature.geometry_type or "", {})
    return fallback(feature.properties or {}, defaults)


def collect_symbolizers(props: Mapping[str, Any]) -> SymbolizerGroups:
    groups: SymbolizerGroups = {}
    for key, value in props.items():
        mapped = STYLE_MAP.get(key)
        if mapped is None:
            continue
        groups.setdefault(mapped.kind, {})[mapped.param] = value
    return groups
