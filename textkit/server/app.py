"""FastAPI app exposing convert()."""

from typing import List, Optional

from fastapi import FastAPI
from pydantic import BaseModel

from textkit import __version__
from textkit.dispatcher import ConvertOptions, Direction, convert, export_filename, target_format
from textkit.result import ErrorKind
from textkit.shared.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="textkit",
    description="CSV, JSON, YAML and XML conversion",
    version=__version__,
)


class ConvertRequest(BaseModel):
    text: str
    direction: Direction
    indent: Optional[int] = None


class ConvertResponse(BaseModel):
    output: str
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    is_valid: bool
    filename: str


class DirectionInfo(BaseModel):
    direction: Direction
    format: str
    filename: str


@app.get("/")
def root():
    """Service status."""
    return {"status": "ok", "version": __version__, "directions": len(Direction)}


@app.get("/directions", response_model=List[DirectionInfo])
def list_directions():
    """Supported directions with their export format and default filename."""
    return [
        DirectionInfo(
            direction=direction,
            format=target_format(direction).value,
            filename=export_filename(direction),
        )
        for direction in Direction
    ]


@app.post("/convert", response_model=ConvertResponse)
def convert_text(request: ConvertRequest):
    """
    Run a conversion.

    Conversion errors are part of the response body, not HTTP errors.
    """
    result = convert(request.text, request.direction, ConvertOptions(indent=request.indent))
    if not result.ok:
        logger.info(f"{request.direction.value} rejected input: {result.error}")

    return ConvertResponse(
        output=result.output,
        error=result.error,
        error_kind=result.error_kind,
        is_valid=result.is_valid,
        filename=export_filename(request.direction),
    )
