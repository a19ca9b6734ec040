from __future__ import annotations

import json

from geo.types import Feature
from mapstyle.constants import WGS84
from mapstyle.markup import tag, text
from mapstyle.style import style_name


def layer_name(i: int) -> str:
    return f"layer-{i}"


def geometry_json(feature: Feature) -> str:
    # Only the geometry goes into the datasource; properties stay in the style.
    return json.dumps(feature.geometry, separators=(",", ":"), ensure_ascii=False)


def compile_layer(feature: Feature, i: int, *, escape: bool = True) -> str | None:
    if not feature.geometry:
        return None

    params = [
        ("type", "ogr"),
        ("layer_by_index", "0"),
        ("driver", "GeoJson"),
        ("string", geometry_json(feature)),
    ]
    datasource = "".join(
        tag("Parameter", text(value, escape=escape), [("name", name)], escape=escape)
        for name, value in params
    )
    return tag(
        "Layer",
        tag("StyleName", text(style_name(i), escape=escape))
        + tag("Datasource", datasource),
        [("name", layer_name(i)), ("srs", WGS84)],
        escape=escape,
    )
