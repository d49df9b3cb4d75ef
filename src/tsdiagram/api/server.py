"""FastAPI server with diagram generation endpoints."""

from __future__ import annotations

import logging
import time
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from tsdiagram import config
from tsdiagram.errors import (
    DiagramError,
    EmptyInput,
    FetchFailure,
    MalformedSource,
    NoSymbolsFound,
)
from tsdiagram.fetcher import SourceFetcher
from tsdiagram.generator import DiagramResult, generate, generate_from_source
from tsdiagram.layout.grid import Point

# Configure logging on import — before anything else logs
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)

app = FastAPI(title="tsdiagram", description="TypeScript source to whiteboard diagrams")

# CORS for the whiteboard dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_STATUS_BY_ERROR: dict[type[DiagramError], int] = {
    EmptyInput: 400,
    FetchFailure: 502,
    NoSymbolsFound: 422,
    MalformedSource: 422,
}


def _get_fetcher() -> SourceFetcher:
    return SourceFetcher()


class OriginModel(BaseModel):
    x: float = 0
    y: float = 0


class DiagramRequest(BaseModel):
    path: str
    origin: OriginModel | None = None


class SourceDiagramRequest(BaseModel):
    file_path: str = "source.ts"
    source: str
    origin: OriginModel | None = None


class DiagramResponse(BaseModel):
    elements: list[dict[str, Any]]


def _origin(model: OriginModel | None) -> Point | None:
    if model is None:
        return None
    return Point(model.x, model.y)


def _to_response(result: DiagramResult) -> DiagramResponse:
    return DiagramResponse(elements=[el.to_dict() for el in result.elements])


def _http_error(e: DiagramError) -> HTTPException:
    status = next(
        (_STATUS_BY_ERROR[cls] for cls in type(e).__mro__ if cls in _STATUS_BY_ERROR),
        400,
    )
    return HTTPException(status_code=status, detail=str(e))


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/diagram", response_model=DiagramResponse)
async def diagram(req: DiagramRequest):
    logger.info("POST /diagram path=%r", req.path[:200])
    t0 = time.perf_counter()
    try:
        result = await generate(req.path, origin=_origin(req.origin), fetcher=_get_fetcher())
    except DiagramError as e:
        logger.info("Diagram request failed after %.2fs: %s", time.perf_counter() - t0, e)
        raise _http_error(e)
    return _to_response(result)


@app.post("/diagram/source", response_model=DiagramResponse)
def diagram_from_source(req: SourceDiagramRequest):
    logger.info("POST /diagram/source file_path=%r (%d chars)", req.file_path, len(req.source))
    try:
        result = generate_from_source(req.file_path, req.source, origin=_origin(req.origin))
    except DiagramError as e:
        raise _http_error(e)
    return _to_response(result)
