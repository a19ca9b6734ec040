from __future__ import annotations

from geo.types import Feature
from mapstyle.marker_ref import marker_reference
from mapstyle.markup import tag, tag_close
from mapstyle.props import collect_symbolizers, resolve_properties
from mapstyle.types import CompiledStyle, SymbolizerKind


def style_name(i: int) -> str:
    return f"style-{i}"


def compile_style(
    feature: Feature, i: int, base_path: str, *, escape: bool = True
) -> CompiledStyle:
    """
    One `<Style name="style-i">` with a single Rule.

    Property-driven symbolizers come first (in first-seen order), then the
    PointSymbolizer for point geometries. A feature with nothing to paint still
    gets an (empty) rule so indices stay aligned with layers.
    """
    groups = collect_symbolizers(resolve_properties(feature))
    symbolizers = [
        tag_close(kind.value, params.items(), escape=escape)
        for kind, params in groups.items()
    ]

    resources: list[str] = []
    marker = marker_reference(feature, base_path)
    if marker is not None:
        resources.append(marker.resource)
        symbolizers.append(
            tag_close(SymbolizerKind.point.value, [("file", marker.file)], escape=escape)
        )

    markup = tag(
        "Style",
        tag("Rule", "".join(symbolizers), escape=escape),
        [("name", style_name(i))],
        escape=escape,
    )
    return CompiledStyle(markup=markup, resources=resources, marker=marker)
