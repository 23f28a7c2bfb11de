"""Data shapes passed between the hint extractor, merger, and renderer.

Recommendation and RenderRequest are frozen: once built they are only read.
Hint types are partial: every field defaults to None, meaning "not set".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

PORTRAIT = "portrait"
LANDSCAPE = "landscape"


@dataclass(frozen=True)
class PageConfig:
    format: str = "A4"
    orientation: str = PORTRAIT
    margin: str = "1cm"

    def to_dict(self) -> dict:
        return {
            "format": self.format,
            "orientation": self.orientation,
            "margin": self.margin,
        }


@dataclass(frozen=True)
class CaptureStrategy:
    wait_time_ms: int = 2000
    javascript_enabled: bool = True
    images_enabled: bool = True
    full_page: bool = True

    def to_dict(self) -> dict:
        return {
            "waitTime": self.wait_time_ms,
            "javascript": self.javascript_enabled,
            "images": self.images_enabled,
            "fullPage": self.full_page,
        }


@dataclass(frozen=True)
class Recommendation:
    """Complete rendering recommendation. Every field is populated."""
    page_config: PageConfig = field(default_factory=PageConfig)
    capture_strategy: CaptureStrategy = field(default_factory=CaptureStrategy)
    optimizations: tuple[str, ...] = ()
    challenges: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "pageConfig": self.page_config.to_dict(),
            "captureStrategy": self.capture_strategy.to_dict(),
            "optimizations": list(self.optimizations),
            "challenges": list(self.challenges),
        }


@dataclass
class PageHints:
    format: Optional[str] = None
    orientation: Optional[str] = None
    margin: Optional[str] = None


@dataclass
class CaptureHints:
    wait_time_ms: Optional[int] = None
    javascript_enabled: Optional[bool] = None
    images_enabled: Optional[bool] = None
    full_page: Optional[bool] = None


@dataclass
class Hints:
    """Zero or more recommendation fields picked out of advice text."""
    page: PageHints = field(default_factory=PageHints)
    capture: CaptureHints = field(default_factory=CaptureHints)
    optimizations: list[str] = field(default_factory=list)
    challenges: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int
    device_scale_factor: float = 2


@dataclass(frozen=True)
class PdfOptions:
    format: str
    landscape: bool
    margin: str
    print_background: bool = True
    prefer_css_page_size: bool = False

    def to_playwright(self) -> dict:
        """Keyword arguments for Playwright's ``page.pdf()``."""
        return {
            "format": self.format,
            "landscape": self.landscape,
            "margin": {
                "top": self.margin,
                "right": self.margin,
                "bottom": self.margin,
                "left": self.margin,
            },
            "print_background": self.print_background,
            "prefer_css_page_size": self.prefer_css_page_size,
        }


@dataclass(frozen=True)
class RenderRequest:
    url: str
    viewport: Viewport
    pdf: PdfOptions
    wait_until: str = "networkidle"
    navigation_timeout_ms: int = 30000
    settle_ms: int = 2000
    javascript_enabled: bool = True
    images_enabled: bool = True


@dataclass
class Insights:
    """Outcome of consulting the advice source for one URL."""
    raw: str
    summary: dict | str
    recommendation: Recommendation
