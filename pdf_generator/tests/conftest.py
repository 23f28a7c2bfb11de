"""Shared fixtures for PDF generator tests.

Provides:
- fake_advisor: advice source returning canned text, or failing
- fake_renderer: records RenderRequests and returns fake PDF bytes
- client: FastAPI TestClient wired to both fakes
- mock_playwright: patches sync_playwright with a MagicMock browser
"""

from unittest.mock import MagicMock, patch

import pytest

from pdf_generator.errors import AdviceUnavailable, RenderError


FAKE_PDF = b"%PDF-1.4 fake-pdf-content"


class FakeAdvisor:
    """Stands in for AdviceClient. ``text=None`` simulates a failing command."""

    def __init__(self, text=None, reason="exit 1: boom"):
        self.text = text
        self.reason = reason
        self.prompts = []

    def get_advice(self, prompt):
        self.prompts.append(prompt)
        if self.text is None:
            raise AdviceUnavailable(self.reason)
        return self.text


class FakeRenderer:
    """Stands in for PdfRenderer."""

    def __init__(self, pdf=FAKE_PDF, error=None):
        self.pdf = pdf
        self.error = error
        self.requests = []

    def render(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return self.pdf


@pytest.fixture
def fake_advisor():
    return FakeAdvisor()


@pytest.fixture
def fake_renderer():
    return FakeRenderer()


@pytest.fixture
def failing_renderer():
    return FakeRenderer(error=RenderError("net::ERR_NAME_NOT_RESOLVED"))


@pytest.fixture
def client(fake_advisor, fake_renderer):
    """Sync test client for the FastAPI app with fake advisor and renderer."""
    from fastapi.testclient import TestClient

    from pdf_generator.app import create_app

    app = create_app(advisor=fake_advisor, renderer=fake_renderer)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def mock_playwright():
    """Patch sync_playwright; yields (browser, page) MagicMocks."""
    page = MagicMock()
    page.pdf.return_value = FAKE_PDF
    context = MagicMock()
    context.new_page.return_value = page
    browser = MagicMock()
    browser.new_context.return_value = context

    manager = MagicMock()
    manager.return_value.__exit__.return_value = False
    playwright = manager.return_value.__enter__.return_value
    playwright.chromium.launch.return_value = browser

    with patch("pdf_generator.services.renderer.sync_playwright", manager):
        yield browser, page


# ---------------------------------------------------------------------------
# Data factories
# ---------------------------------------------------------------------------

def make_lambda_context(request_id="req-123"):
    context = MagicMock()
    context.aws_request_id = request_id
    return context
