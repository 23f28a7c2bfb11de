"""Render a live web page to PDF with Playwright (headless Chromium).

Each render owns its own browser session; the browser is closed on every
exit path before any error propagates.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Browser, Error as PlaywrightError, Route, sync_playwright

from pdf_generator.errors import RenderError
from pdf_generator.models import RenderRequest

logger = logging.getLogger(__name__)

LAUNCH_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--single-process",
)


def _block_images(route: Route) -> None:
    if route.request.resource_type == "image":
        route.abort()
    else:
        route.continue_()


class PdfRenderer:
    def __init__(
        self,
        executable_path: str | None = None,
        launch_args: tuple[str, ...] = LAUNCH_ARGS,
        headless: bool = True,
    ):
        self.executable_path = executable_path or None
        self.launch_args = list(launch_args)
        self.headless = headless

    @contextmanager
    def session(self) -> Iterator[Browser]:
        """Launch Chromium and guarantee it is closed exactly once."""
        with sync_playwright() as p:
            browser = p.chromium.launch(
                executable_path=self.executable_path,
                headless=self.headless,
                args=self.launch_args,
            )
            try:
                yield browser
            finally:
                browser.close()

    def render(self, request: RenderRequest) -> bytes:
        """Navigate to ``request.url`` and return the printed PDF bytes."""
        logger.info("Rendering %s", request.url)
        try:
            with self.session() as browser:
                context = browser.new_context(
                    viewport={
                        "width": request.viewport.width,
                        "height": request.viewport.height,
                    },
                    device_scale_factor=request.viewport.device_scale_factor,
                    java_script_enabled=request.javascript_enabled,
                )
                page = context.new_page()
                if not request.images_enabled:
                    page.route("**/*", _block_images)

                page.goto(
                    request.url,
                    wait_until=request.wait_until,
                    timeout=request.navigation_timeout_ms,
                )

                logger.info("Waiting %dms for page to settle", request.settle_ms)
                page.wait_for_timeout(request.settle_ms)

                options = request.pdf.to_playwright()
                logger.debug("PDF options: %s", options)
                pdf = page.pdf(**options)
        except PlaywrightError as e:
            raise RenderError(str(e)) from e

        logger.info("PDF generated: %d bytes", len(pdf))
        return pdf
