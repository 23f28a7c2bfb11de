"""Tests for the Playwright renderer: session lifecycle and page calls."""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError

from pdf_generator.errors import RenderError
from pdf_generator.services.recommendations import default_recommendation
from pdf_generator.services.render_config import build_render_request
from pdf_generator.services import renderer as renderer_module
from pdf_generator.services.renderer import LAUNCH_ARGS, PdfRenderer, _block_images
from pdf_generator.tests.conftest import FAKE_PDF


@pytest.fixture
def request_():
    return build_render_request("https://example.com", default_recommendation())


class TestSession:
    """Browser is closed exactly once on every exit path."""

    def test_closes_after_success(self, mock_playwright, request_):
        browser, _ = mock_playwright
        assert PdfRenderer().render(request_) == FAKE_PDF
        browser.close.assert_called_once()

    def test_closes_after_navigation_failure(self, mock_playwright, request_):
        browser, page = mock_playwright
        page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")
        with pytest.raises(RenderError, match="ERR_NAME_NOT_RESOLVED"):
            PdfRenderer().render(request_)
        browser.close.assert_called_once()

    def test_closes_after_unexpected_error(self, mock_playwright, request_):
        browser, page = mock_playwright
        page.pdf.side_effect = RuntimeError("crash")
        with pytest.raises(RuntimeError):
            PdfRenderer().render(request_)
        browser.close.assert_called_once()

    def test_launch_options(self, mock_playwright):
        browser, _ = mock_playwright
        renderer = PdfRenderer(executable_path="/opt/chromium")
        with renderer.session() as b:
            assert b is browser
        launch = renderer_module.sync_playwright.return_value.__enter__.return_value.chromium.launch
        launch.assert_called_once_with(
            executable_path="/opt/chromium", headless=True, args=list(LAUNCH_ARGS),
        )

    def test_empty_executable_path_uses_bundled_browser(self):
        assert PdfRenderer(executable_path="").executable_path is None


class TestRender:
    """Page configured from the RenderRequest."""

    def test_page_calls(self, mock_playwright, request_):
        browser, page = mock_playwright
        PdfRenderer().render(request_)

        browser.new_context.assert_called_once_with(
            viewport={"width": 1080, "height": 1920},
            device_scale_factor=2,
            java_script_enabled=True,
        )
        page.goto.assert_called_once_with(
            "https://example.com", wait_until="networkidle", timeout=30000,
        )
        page.wait_for_timeout.assert_called_once_with(2000)
        page.pdf.assert_called_once_with(**request_.pdf.to_playwright())
        page.route.assert_not_called()

    def test_blocks_images_when_disabled(self, mock_playwright, request_):
        _, page = mock_playwright
        PdfRenderer().render(replace(request_, images_enabled=False))
        page.route.assert_called_once_with("**/*", _block_images)


class TestBlockImages:
    def test_aborts_images(self):
        route = MagicMock()
        route.request.resource_type = "image"
        _block_images(route)
        route.abort.assert_called_once()
        route.continue_.assert_not_called()

    def test_continues_other_resources(self):
        route = MagicMock()
        route.request.resource_type = "script"
        _block_images(route)
        route.continue_.assert_called_once()
