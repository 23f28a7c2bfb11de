"""Tests for URL normalization and the render configuration builder."""

from dataclasses import replace

import pytest

from pdf_generator.models import PageConfig
from pdf_generator.services.recommendations import default_recommendation
from pdf_generator.services.render_config import build_render_request, normalize_url


def _landscape(rec):
    return replace(rec, page_config=replace(rec.page_config, orientation="landscape"))


class TestNormalizeUrl:
    @pytest.mark.parametrize("raw", ["example.com", "www.example.com/path?q=1", "ftp.example.com"])
    def test_prepends_https(self, raw):
        assert normalize_url(raw) == f"https://{raw}"

    @pytest.mark.parametrize("raw", ["https://example.com", "http://example.com", "https://a.b/c"])
    def test_identity_with_scheme(self, raw):
        assert normalize_url(raw) == raw


class TestBuildRenderRequest:
    """Pure mapping from Recommendation to RenderRequest."""

    def test_portrait_viewport(self):
        request = build_render_request("https://example.com", default_recommendation())
        assert (request.viewport.width, request.viewport.height) == (1080, 1920)
        assert request.viewport.device_scale_factor == 2

    def test_landscape_viewport(self):
        request = build_render_request("https://example.com", _landscape(default_recommendation()))
        assert (request.viewport.width, request.viewport.height) == (1920, 1080)
        assert request.pdf.landscape is True

    def test_is_deterministic(self):
        rec = default_recommendation()
        assert build_render_request("https://x.io", rec) == build_render_request("https://x.io", rec)

    def test_wait_policy(self):
        request = build_render_request("https://example.com", default_recommendation())
        assert request.wait_until == "networkidle"
        assert request.navigation_timeout_ms == 30000
        assert request.settle_ms == 2000

    def test_pdf_options(self):
        rec = replace(
            default_recommendation(),
            page_config=PageConfig(format="Letter", orientation="portrait", margin="2cm"),
        )
        options = build_render_request("https://example.com", rec).pdf.to_playwright()
        assert options == {
            "format": "Letter",
            "landscape": False,
            "margin": {"top": "2cm", "right": "2cm", "bottom": "2cm", "left": "2cm"},
            "print_background": True,
            "prefer_css_page_size": False,
        }

    def test_capture_flags_carried(self):
        rec = default_recommendation()
        rec = replace(rec, capture_strategy=replace(rec.capture_strategy, images_enabled=False))
        request = build_render_request("https://example.com", rec)
        assert request.images_enabled is False
        assert request.javascript_enabled is True
