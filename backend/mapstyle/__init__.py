"""
GeoJSON -> Mapnik XML.

Each feature becomes a `style-<i>` Style and (when it has a geometry) a
`layer-<i>` Layer with the geometry inlined as an OGR GeoJSON datasource.
"""
from .document import assemble, generate_xml
from .types import MapnikDocument

__all__ = [
    "MapnikDocument",
    "assemble",
    "generate_xml",
]
