"""Endpoints that expose document segmentation."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, Response, UploadFile

from doc2json.api.deps import get_app_settings
from doc2json.block_exporter import build_blocks_response, dump_blocks
from doc2json.core.config import Settings
from doc2json.document_models import Document
from doc2json.document_processing import load_blocks
from doc2json.errors import DocumentDecodeError, UnrecognizedBlockError
from doc2json.schemas import ConvertRequest, ConvertResponse
from doc2json.segmenter import segment

logger = logging.getLogger("doc2json.api.blocks")

router = APIRouter(prefix="/blocks", tags=["blocks"])


def _check_size(size: int, settings: Settings) -> None:
    if size > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Document is larger than {settings.max_upload_bytes} bytes",
        )


def _load_payload(payload: bytes, source: str) -> Document:
    try:
        return load_blocks(payload)
    except DocumentDecodeError as exc:
        raise HTTPException(status_code=415, detail=str(exc)) from exc
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.exception("Failed to segment document '%s'", source)
        raise HTTPException(status_code=400, detail="Failed to process document") from exc


def _to_response(document: Document) -> ConvertResponse:
    try:
        return ConvertResponse(blocks=build_blocks_response(document))
    except UnrecognizedBlockError as exc:  # pragma: no cover - defensive logging
        logger.error("%s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.post("", response_model=ConvertResponse)
def convert_text(
    payload: ConvertRequest,
    settings: Settings = Depends(get_app_settings),
) -> ConvertResponse:
    """Segment text sent as a JSON string."""

    _check_size(len(payload.text.encode("utf-8")), settings)
    return _to_response(segment(payload.text))


@router.post("/file", response_model=ConvertResponse)
async def convert_file(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_app_settings),
) -> ConvertResponse:
    """Segment an uploaded UTF-8 text file."""

    if file.size is not None:
        _check_size(file.size, settings)
    contents = await file.read(settings.max_upload_bytes + 1)
    _check_size(len(contents), settings)
    document = _load_payload(contents, file.filename or "upload")
    logger.info("Segmented '%s' into %d blocks", file.filename, len(document))
    return _to_response(document)


@router.post("/raw")
async def convert_raw(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Segment the raw request body and answer in the command line's JSON format."""

    body = await request.body()
    _check_size(len(body), settings)
    document = _load_payload(body, "request body")
    try:
        content = dump_blocks(
            document,
            indent=settings.json_indent,
            escape_html=settings.escape_html,
        )
    except UnrecognizedBlockError as exc:  # pragma: no cover - defensive logging
        logger.error("%s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return Response(content=content, media_type="application/json")
