from __future__ import annotations

from geo.types import Feature
from mapstyle.props import collect_symbolizers, fallback, resolve_properties
from mapstyle.types import SymbolizerKind


LINE = {"type": "LineString", "coordinates": [[0, 0], [1, 1]]}
POLY = {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]}
POINT = {"type": "Point", "coordinates": [0, 0]}


def test_fallback_only_fills_missing_keys():
    out = fallback({"a": None, "b": False}, {"a": 1, "b": 2, "c": 3})
    assert out == {"a": None, "b": False, "c": 3}


def test_line_defaults():
    props = resolve_properties(Feature(geometry=LINE))
    assert props == {"stroke": "#555555", "stroke-width": 2, "stroke-opacity": 1}


def test_polygon_override_wins_and_missing_default_is_filled():
    props = resolve_properties(Feature(geometry=POLY, properties={"fill": "#ff0000"}))
    assert props["fill"] == "#ff0000"
    assert props["fill-opacity"] == 0.5


def test_point_and_missing_geometry_get_no_defaults():
    assert resolve_properties(Feature(geometry=POINT)) == {}
    assert resolve_properties(Feature(geometry=None, properties={"x": 1})) == {"x": 1}


def test_collect_symbolizers_groups_and_drops_unknown():
    groups = collect_symbolizers(
        {
            "title": "ignored",
            "fill-opacity": 0.2,
            "stroke": "#000",
            "fill": "#fff",
            "stroke-width": 3,
        }
    )
    assert list(groups) == [SymbolizerKind.polygon, SymbolizerKind.line]
    assert groups[SymbolizerKind.polygon] == {"opacity": 0.2, "fill": "#fff"}
    assert groups[SymbolizerKind.line] == {"stroke": "#000", "stroke-width": 3}


def test_collect_symbolizers_empty():
    assert collect_symbolizers({"name": "x"}) == {}


def test_multi_geometries_share_single_geometry_defaults():
    mline = {"type": "MultiLineString", "coordinates": [[[0, 0], [1, 1]]]}
    mpoly = {"type": "MultiPolygon", "coordinates": [[[[0, 0], [1, 0], [1, 1], [0, 0]]]]}
    assert resolve_properties(Feature(geometry=mline)) == {
        "stroke": "#555555",
        "stroke-width": 2,
        "stroke-opacity": 1,
    }
    assert resolve_properties(Feature(geometry=mpoly)) == {"fill": "#555555", "fill-opacity": 0.5}


def test_geometry_collection_gets_no_defaults():
    gc = {"type": "GeometryCollection", "geometries": [LINE, POLY]}
    assert resolve_properties(Feature(geometry=gc, properties={"a": 1})) == {"a": 1}
