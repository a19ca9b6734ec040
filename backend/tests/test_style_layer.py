from __future__ import annotations

import json
import xml.etree.ElementTree as ET

from geo.types import Feature
from mapstyle.constants import WGS84
from mapstyle.layer import compile_layer
from mapstyle.style import compile_style


LINE = {"type": "LineString", "coordinates": [[14.42, 50.08], [14.43, 50.09]]}


def test_line_style_has_default_line_symbolizer():
    out = compile_style(Feature(geometry=LINE), 3, "/tmp")
    assert out.resources == []

    style = ET.fromstring(out.markup)
    assert style.tag == "Style"
    assert style.get("name") == "style-3"
    rule = style.find("Rule")
    assert rule is not None
    sym = rule.find("LineSymbolizer")
    assert sym is not None
    assert sym.attrib == {"stroke": "#555555", "stroke-width": "2", "stroke-opacity": "1"}


def test_point_marker_comes_after_property_symbolizers():
    feature = Feature(
        geometry={"type": "Point", "coordinates": [0, 0]},
        properties={"stroke": "#111", "marker-color": "#f00"},
    )
    out = compile_style(feature, 0, "/srv/pins")
    assert out.resources == ["pin-m+f00"]

    rule = ET.fromstring(out.markup).find("Rule")
    assert [c.tag for c in rule] == ["LineSymbolizer", "PointSymbolizer"]
    assert rule[1].attrib == {"file": "/srv/pins/pin-m+f00.png"}


def test_feature_without_symbolizers_still_gets_a_style():
    out = compile_style(Feature(geometry=None, properties={"name": "x"}), 7, "/tmp")
    assert out.markup == '<Style name="style-7"><Rule></Rule></Style>'
    assert out.resources == []


def test_layer_references_style_and_embeds_geometry_only():
    feature = Feature(geometry=LINE, properties={"stroke": "#000", "name": "tram"})
    markup = compile_layer(feature, 2)
    assert markup is not None

    layer = ET.fromstring(markup)
    assert layer.get("name") == "layer-2"
    assert layer.get("srs") == WGS84
    assert layer.findtext("StyleName") == "style-2"

    params = {p.get("name"): p.text for p in layer.find("Datasource").findall("Parameter")}
    assert params["type"] == "ogr"
    assert params["layer_by_index"] == "0"
    assert params["driver"] == "GeoJson"
    assert json.loads(params["string"]) == LINE


def test_layer_is_none_without_geometry():
    assert compile_layer(Feature(geometry=None), 0) is None
