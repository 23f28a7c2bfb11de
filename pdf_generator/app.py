"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from pdf_generator.handler import default_advisor, default_renderer
from pdf_generator.routers import generate
from pdf_generator.services.advice import AdviceClient
from pdf_generator.services.renderer import PdfRenderer

logger = logging.getLogger(__name__)


def create_app(advisor: AdviceClient | None = None, renderer: PdfRenderer | None = None) -> FastAPI:
    app = FastAPI(
        title="Site to PDF Generator",
        description=(
            "Renders a web page to PDF with headless Chromium, "
            "tuned by hints from a command-line AI assistant."
        ),
        version="1.0.0",
    )

    app.state.advisor = advisor or default_advisor()
    app.state.renderer = renderer or default_renderer()

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    app.include_router(generate.router)

    return app
