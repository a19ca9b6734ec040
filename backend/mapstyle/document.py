from __future__ import annotations

from typing import Any

from loguru import logger

from geo.normalize import normalize
from geo.types import Feature
from mapstyle.config import marker_base_path, xml_escape_enabled
from mapstyle.constants import FOOTER, HEADER
from mapstyle.layer import compile_layer
from mapstyle.style import compile_style
from mapstyle.types import CompiledFeature, MapnikDocument


def convert_feature(
    feature: Feature, i: int, base_path: str, *, escape: bool = True
) -> CompiledFeature:
    style = compile_style(feature, i, base_path, escape=escape)
    return CompiledFeature(
        style=style.markup,
        layer=compile_layer(feature, i, escape=escape),
        resources=style.resources,
        marker=style.marker,
    )


def assemble(
    features: list[Feature], base_path: str, *, escape: bool = True
) -> MapnikDocument:
    """
    Concatenate every style, then every layer, inside the Map header/footer.

    Features without geometry keep their style slot but contribute no layer.
    """
    compiled = [
        convert_feature(f, i, base_path, escape=escape) for i, f in enumerate(features)
    ]
    xml = (
        HEADER
        + "".join(c.style for c in compiled)
        + "".join(c.layer for c in compiled if c.layer is not None)
        + FOOTER
    )
    resources = [r for c in compiled for r in c.resources]
    markers = [c.marker for c in compiled if c.marker is not None]
    return MapnikDocument(xml=xml, resources=resources, markers=markers)


def generate_xml(
    data: Any, base_path: str | None = None, *, escape: bool | None = None
) -> MapnikDocument | None:
    """
    GeoJSON -> Mapnik stylesheet.

    Returns None when `data` is not GeoJSON. `base_path` prefixes marker file
    references (defaults to MAPSTYLE_TMP_PATH); `escape` defaults to
    MAPSTYLE_XML_ESCAPE.
    """
    gj = normalize(data)
    if gj is None:
        return None

    doc = assemble(
        gj.features,
        marker_base_path() if base_path is None else base_path,
        escape=xml_escape_enabled() if escape is None else escape,
    )
    logger.debug(
        f"generate_xml: features={len(gj)} urls={len(doc.remote_markers)} "
        f"pins={len(doc.pin_markers)} bytes={len(doc.xml)}"
    )
    return doc
