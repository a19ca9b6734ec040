from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.mapnik import (
    ApiMapnikRequest,
    ApiMapnikResponse,
    ApiMarkerInfo,
    handle_mapnik,
    handle_marker_inspect,
)

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/mapnik", response_model=ApiMapnikResponse)
def mapnik(body: ApiMapnikRequest):
    return handle_mapnik(body)


@app.post("/markers/inspect", response_model=ApiMarkerInfo)
async def marker_inspect(request: Request, tint: str | None = None):
    data = await request.body()
    return handle_marker_inspect(data, tint)
