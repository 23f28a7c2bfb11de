"""Recommendation defaults and the merger that overlays extracted hints."""

from __future__ import annotations

import re
from dataclasses import replace

from pdf_generator.models import (
    LANDSCAPE, PORTRAIT, CaptureStrategy, Hints, PageConfig, Recommendation,
)

PAGE_FORMATS = {
    "letter": "Letter",
    "legal": "Legal",
    "tabloid": "Tabloid",
    "ledger": "Ledger",
    "a0": "A0",
    "a1": "A1",
    "a2": "A2",
    "a3": "A3",
    "a4": "A4",
    "a5": "A5",
    "a6": "A6",
}
ORIENTATIONS = {PORTRAIT, LANDSCAPE}
_MARGIN_RE = re.compile(r"^\d+(\.\d+)?(px|in|cm|mm)$")

# Bounds on the post-navigation settle delay
MIN_WAIT_MS = 1000
MAX_WAIT_MS = 5000

DEFAULT_OPTIMIZATIONS = (
    "compress-images",
    "optimize-fonts",
    "remove-unnecessary-elements",
)


def default_recommendation() -> Recommendation:
    """Configuration used when no advice is available."""
    return Recommendation(
        page_config=PageConfig(format="A4", orientation=PORTRAIT, margin="1cm"),
        capture_strategy=CaptureStrategy(
            wait_time_ms=2000,
            javascript_enabled=True,
            images_enabled=True,
            full_page=True,
        ),
        optimizations=DEFAULT_OPTIMIZATIONS,
        challenges=(),
    )


def normalize_format(value) -> str | None:
    """Canonical page format name, or None if unrecognized."""
    if not isinstance(value, str):
        return None
    return PAGE_FORMATS.get(value.strip().lower())


def normalize_orientation(value) -> str | None:
    if not isinstance(value, str):
        return None
    value = value.strip().lower()
    return value if value in ORIENTATIONS else None


def normalize_margin(value) -> str | None:
    if not isinstance(value, str):
        return None
    value = value.strip().lower()
    return value if _MARGIN_RE.match(value) else None


def clamp_wait(value: int) -> int:
    return max(MIN_WAIT_MS, min(MAX_WAIT_MS, int(value)))


def _pick(value, default):
    return default if value is None else value


def _append_unique(existing: tuple[str, ...], extra: list[str]) -> tuple[str, ...]:
    items = list(existing)
    for item in extra:
        if isinstance(item, str) and item and item not in items:
            items.append(item)
    return tuple(items)


def merge(hints: Hints | None, default: Recommendation) -> Recommendation:
    """Overlay every field set in ``hints`` onto ``default``.

    Invalid or unknown values fall back to the default's value, the wait time
    is clamped to [MIN_WAIT_MS, MAX_WAIT_MS], and optimization/challenge tags
    are appended. Never raises.
    """
    if hints is None:
        return default

    page = default.page_config
    page = replace(
        page,
        format=_pick(normalize_format(hints.page.format), page.format),
        orientation=_pick(normalize_orientation(hints.page.orientation), page.orientation),
        margin=_pick(normalize_margin(hints.page.margin), page.margin),
    )

    capture = default.capture_strategy
    wait = hints.capture.wait_time_ms
    if isinstance(wait, bool) or not isinstance(wait, (int, float)):
        wait = None
    capture = replace(
        capture,
        wait_time_ms=capture.wait_time_ms if wait is None else clamp_wait(wait),
        javascript_enabled=_pick(_as_bool(hints.capture.javascript_enabled), capture.javascript_enabled),
        images_enabled=_pick(_as_bool(hints.capture.images_enabled), capture.images_enabled),
        full_page=_pick(_as_bool(hints.capture.full_page), capture.full_page),
    )

    return Recommendation(
        page_config=page,
        capture_strategy=capture,
        optimizations=_append_unique(default.optimizations, hints.optimizations),
        challenges=_append_unique(default.challenges, hints.challenges),
    )


def _as_bool(value) -> bool | None:
    return value if isinstance(value, bool) else None
