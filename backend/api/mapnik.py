from __future__ import annotations

from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel, Field

from mapstyle import generate_xml
from markers import MarkerError, inspect_marker


class ApiMapnikRequest(BaseModel):
    geojson: Any
    # Prefix for computed marker files; server default when omitted.
    basePath: str | None = None
    escape: bool | None = None


class ApiMarkerRef(BaseModel):
    kind: str  # "url" | "pin"
    resource: str
    file: str


class ApiMapnikResponse(BaseModel):
    xml: str
    resources: list[str]
    markers: list[ApiMarkerRef] = Field(default_factory=list)


class ApiMarkerInfo(BaseModel):
    size: int
    width: int
    height: int
    tint: str | None = None


def handle_mapnik(body: ApiMapnikRequest) -> ApiMapnikResponse:
    doc = generate_xml(body.geojson, body.basePath, escape=body.escape)
    if doc is None:
        raise HTTPException(status_code=422, detail="Input is not valid GeoJSON.")
    return ApiMapnikResponse(
        xml=doc.xml,
        resources=doc.resources,
        markers=[
            ApiMarkerRef(kind=m.kind, resource=m.resource, file=m.file)
            for m in doc.markers
        ],
    )


def handle_marker_inspect(data: bytes, tint: str | None) -> ApiMarkerInfo:
    try:
        img = inspect_marker(data, tint)
    except MarkerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return ApiMarkerInfo(
        size=img.size,
        width=img.width,
        height=img.height,
        tint=img.tint.hex if img.tint is not None else None,
    )
