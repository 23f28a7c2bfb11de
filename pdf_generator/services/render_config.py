"""Maps a Recommendation onto the exact parameters the renderer needs."""

from pdf_generator.models import LANDSCAPE, PdfOptions, Recommendation, RenderRequest, Viewport

LANDSCAPE_VIEWPORT = (1920, 1080)
PORTRAIT_VIEWPORT = (1080, 1920)
DEVICE_SCALE_FACTOR = 2

# Playwright has no "networkidle2"; networkidle waits for 500ms with no requests
WAIT_UNTIL = "networkidle"
NAVIGATION_TIMEOUT_MS = 30000


def normalize_url(url: str) -> str:
    """Prepend https:// unless the URL already carries an http(s) scheme."""
    if not url.startswith("http://") and not url.startswith("https://"):
        return f"https://{url}"
    return url


def build_render_request(url: str, rec: Recommendation) -> RenderRequest:
    page = rec.page_config
    landscape = page.orientation == LANDSCAPE
    width, height = LANDSCAPE_VIEWPORT if landscape else PORTRAIT_VIEWPORT

    return RenderRequest(
        url=url,
        viewport=Viewport(width=width, height=height, device_scale_factor=DEVICE_SCALE_FACTOR),
        pdf=PdfOptions(
            format=page.format,
            landscape=landscape,
            margin=page.margin,
            print_background=True,
            prefer_css_page_size=False,
        ),
        wait_until=WAIT_UNTIL,
        navigation_timeout_ms=NAVIGATION_TIMEOUT_MS,
        settle_ms=rec.capture_strategy.wait_time_ms,
        javascript_enabled=rec.capture_strategy.javascript_enabled,
        images_enabled=rec.capture_strategy.images_enabled,
    )
