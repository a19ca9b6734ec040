from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from loguru import logger
from shapely.errors import ShapelyError
from shapely.geometry import shape

from geo.types import GEOMETRY_TYPES, Feature, FeatureCollection


class _NotGeoJSON(ValueError):
    pass


def normalize(data: Any) -> FeatureCollection | None:
    """
    Coerce a GeoJSON-ish value into a FeatureCollection.

    Accepts a FeatureCollection, a single Feature or a bare geometry (as a mapping
    or as a JSON string). Returns None when the value cannot be read as GeoJSON;
    callers treat that as "nothing to compile".
    """
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except ValueError:
            logger.debug("normalize: input is not JSON")
            return None

    try:
        return _normalize(data)
    except _NotGeoJSON as e:
        logger.debug(f"normalize: {e}")
        return None


def _normalize(data: Any) -> FeatureCollection:
    if not isinstance(data, Mapping):
        raise _NotGeoJSON(f"expected an object, got {type(data).__name__}")

    gtype = data.get("type")
    if gtype == "FeatureCollection":
        features = data.get("features")
        if not isinstance(features, list):
            raise _NotGeoJSON("FeatureCollection.features must be a list")
        return FeatureCollection(features=[_feature(f) for f in features])
    if gtype == "Feature":
        return FeatureCollection(features=[_feature(data)])
    if gtype in GEOMETRY_TYPES:
        return FeatureCollection(features=[Feature(geometry=_geometry(data), properties={})])

    raise _NotGeoJSON(f"unknown GeoJSON type: {gtype!r}")


def _feature(raw: Any) -> Feature:
    if not isinstance(raw, Mapping):
        raise _NotGeoJSON("feature must be an object")

    props = raw.get("properties")
    if props is None:
        props = {}
    elif not isinstance(props, Mapping):
        raise _NotGeoJSON("feature properties must be an object")

    geom = raw.get("geometry")
    return Feature(
        geometry=_geometry(geom) if geom is not None else None,
        properties=dict(props),
    )


def _geometry(raw: Any) -> dict[str, Any]:
    _check_geometry(raw)
    try:
        shape(raw)
    except (ShapelyError, ValueError, TypeError, KeyError, IndexError) as e:
        # Still GeoJSON; the renderer may skip it, the rest of the map is unaffected.
        logger.warning(f"normalize: {raw.get('type')} geometry may not render: {e}")
    # Keep the caller's mapping untouched; it is embedded verbatim downstream.
    return raw if isinstance(raw, dict) else dict(raw)


def _check_geometry(raw: Any) -> None:
    if not isinstance(raw, Mapping) or raw.get("type") not in GEOMETRY_TYPES:
        raise _NotGeoJSON("geometry must be a GeoJSON geometry object")
    if raw["type"] == "GeometryCollection":
        members = raw.get("geometries")
        if not isinstance(members, list):
            raise _NotGeoJSON("GeometryCollection.geometries must be a list")
        for member in members:
            _check_geometry(member)
    elif not isinstance(raw.get("coordinates"), list):
        raise _NotGeoJSON(f"{raw['type']}.coordinates must be a list")
