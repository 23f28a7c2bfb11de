"""Event-shaped entry point shared by the Lambda handler and the HTTP router.

An event carries the URL in one of three places: ``event["url"]``,
``event["body"]["url"]`` (body may be a JSON string), or
``event["queryStringParameters"]["url"]``.
"""

from __future__ import annotations

import base64
import json
import logging
from datetime import datetime, timezone

from pdf_generator.config import ADVICE_COMMAND, ADVICE_TIMEOUT_SECS, AWS_REGION, CHROMIUM_PATH
from pdf_generator.services.advice import AdviceClient
from pdf_generator.services.converter import convert
from pdf_generator.services.renderer import PdfRenderer

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": (
        "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token"
    ),
    "Access-Control-Allow-Methods": "POST,OPTIONS",
}

MISSING_URL_ERROR = "URL is required"
INTERNAL_ERROR = "Internal server error"


def create_response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps(body, indent=2, ensure_ascii=False),
    }


def _parse_body(body) -> dict:
    if isinstance(body, (bytes, str)):
        try:
            body = json.loads(body) if body else {}
        except ValueError:
            return {}
    return body if isinstance(body, dict) else {}


def extract_url(event: dict) -> str | None:
    """Find the target URL in any supported event shape."""
    if not isinstance(event, dict):
        return None
    candidates = (
        event.get("url"),
        _parse_body(event.get("body")).get("url"),
        (event.get("queryStringParameters") or {}).get("url"),
    )
    for url in candidates:
        if isinstance(url, str) and url.strip():
            return url.strip()
    return None


def handle_event(
    event: dict,
    request_id: str,
    advisor: AdviceClient,
    renderer: PdfRenderer,
) -> dict:
    """Convert the URL named by ``event`` and build the response envelope."""
    url = extract_url(event)
    if not url:
        return create_response(400, {
            "error": MISSING_URL_ERROR,
            "message": 'Provide a valid URL in the "url" parameter',
        })

    try:
        result = convert(url, advisor, renderer)
    except Exception as e:
        logger.exception("Conversion failed for %s (request %s)", url, request_id)
        return create_response(500, {
            "error": INTERNAL_ERROR,
            "message": str(e),
            "requestId": request_id,
        })

    return create_response(200, {
        "success": True,
        "url": result.url,
        "pdfBase64": base64.b64encode(result.pdf).decode("ascii"),
        "qInsights": result.insights.summary,
        "fileSize": len(result.pdf),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })


def default_advisor() -> AdviceClient:
    return AdviceClient(command=ADVICE_COMMAND, timeout=ADVICE_TIMEOUT_SECS, region=AWS_REGION)


def default_renderer() -> PdfRenderer:
    return PdfRenderer(executable_path=CHROMIUM_PATH)


def handler(event, context):
    """AWS Lambda entry point."""
    request_id = getattr(context, "aws_request_id", "") or ""
    logger.info("Starting site-to-PDF conversion (request %s)", request_id)
    return handle_event(event, request_id, default_advisor(), default_renderer())
