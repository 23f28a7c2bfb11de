"""Conversion pipeline: URL -> advice -> recommendation -> PDF bytes."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from pdf_generator.models import Insights
from pdf_generator.services.advice import AdviceClient, consult
from pdf_generator.services.render_config import build_render_request, normalize_url
from pdf_generator.services.renderer import PdfRenderer

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    url: str
    pdf: bytes
    insights: Insights


def convert(url: str, advisor: AdviceClient, renderer: PdfRenderer) -> ConversionResult:
    """Run one conversion. Render failures propagate; advice failures do not."""
    normalized = normalize_url(url)
    logger.info("Normalized URL: %s", normalized)

    insights = consult(normalized, advisor)
    logger.info("Driving recommendation: %s", json.dumps(insights.recommendation.to_dict()))
    request = build_render_request(normalized, insights.recommendation)
    pdf = renderer.render(request)

    return ConversionResult(url=normalized, pdf=pdf, insights=insights)
