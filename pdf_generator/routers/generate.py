"""PDF generation endpoint: turns an HTTP request into a handler event."""

import asyncio
import json
import logging
import uuid

from fastapi import APIRouter, Request, Response

from pdf_generator.handler import CORS_HEADERS, handle_event

logger = logging.getLogger(__name__)

router = APIRouter()


async def _build_event(request: Request) -> dict:
    event = {"queryStringParameters": dict(request.query_params) or None}
    raw = await request.body()
    if raw:
        try:
            event["body"] = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring non-JSON request body")
    return event


@router.post("/generate-pdf")
async def generate_pdf(request: Request):
    event = await _build_event(request)
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())

    # Playwright's sync API and the advice subprocess block; keep them off the loop
    result = await asyncio.to_thread(
        handle_event,
        event,
        request_id,
        request.app.state.advisor,
        request.app.state.renderer,
    )
    return Response(
        content=result["body"],
        status_code=result["statusCode"],
        headers=result["headers"],
    )


@router.options("/generate-pdf")
async def generate_pdf_preflight():
    headers = {k: v for k, v in CORS_HEADERS.items() if k != "Content-Type"}
    return Response(status_code=204, headers=headers)
