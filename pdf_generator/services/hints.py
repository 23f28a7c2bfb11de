"""Hint extraction from free-text assistant advice.

Two keyword passes run over the same text:

- the summary pass (extract_page_config / extract_capture_strategy /
  extract_insights) produces the informational summary echoed to the caller;
- the recommendation pass (extract_recommendations) produces the
  Recommendation that actually drives rendering.

Both are tables of KeywordRule applied in order over the lower-cased text, so
a later rule overwrites fields set by an earlier one. Nothing here raises.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Callable

from pdf_generator.models import (
    LANDSCAPE, CaptureStrategy, Hints, PageConfig, Recommendation,
)
from pdf_generator.services.recommendations import default_recommendation, merge

logger = logging.getLogger(__name__)

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")

SUMMARY_LENGTH = 200
HIGH_QUALITY_TAG = "high-quality-rendering"


@dataclass(frozen=True)
class KeywordRule:
    """Apply ``action`` to the hints when any keyword occurs in the text."""
    keywords: tuple[str, ...]
    action: Callable[[Hints], None]

    def matches(self, lowered: str) -> bool:
        return any(k in lowered for k in self.keywords)


def _set(group: str, name: str, value) -> Callable[[Hints], None]:
    def action(hints: Hints) -> None:
        setattr(getattr(hints, group), name, value)
    return action


def _dynamic_content(hints: Hints) -> None:
    hints.capture.javascript_enabled = True
    hints.capture.wait_time_ms = 5000


def _high_quality(hints: Hints) -> None:
    hints.optimizations.append(HIGH_QUALITY_TAG)


SUMMARY_RULES = (
    KeywordRule(("landscape", "horizontal"), _set("page", "orientation", LANDSCAPE)),
    KeywordRule(("letter",), _set("page", "format", "Letter")),
    KeywordRule(("dynamic",), _set("capture", "wait_time_ms", 3000)),
    KeywordRule(("disable javascript",), _set("capture", "javascript_enabled", False)),
    KeywordRule(("no images",), _set("capture", "images_enabled", False)),
)

RECOMMENDATION_RULES = (
    KeywordRule(("landscape",), _set("page", "orientation", LANDSCAPE)),
    KeywordRule(("a3", "large"), _set("page", "format", "A3")),
    KeywordRule(("javascript", "dynamic"), _dynamic_content),
    KeywordRule(("high quality", "print quality"), _high_quality),
)

# Summary pass starts from a shorter settle delay than the rendering defaults
SUMMARY_BASE = Recommendation(
    page_config=PageConfig(),
    capture_strategy=CaptureStrategy(wait_time_ms=1000),
)


def find_json_object(text: str) -> dict | None:
    """Parse the first-``{``-to-last-``}`` span of ``text`` as a JSON object."""
    match = _JSON_OBJECT_RE.search(text)
    if not match:
        return None
    try:
        parsed = json.loads(match.group(0))
    except ValueError:
        logger.debug("Embedded object in advice is not valid JSON")
        return None
    return parsed if isinstance(parsed, dict) else None


def extract_hints(text: str, rules: tuple[KeywordRule, ...]) -> Hints:
    """Populate a Hints from every rule whose keywords appear in ``text``."""
    lowered = text.lower()
    hints = Hints()
    for rule in rules:
        if rule.matches(lowered):
            rule.action(hints)
    return hints


def extract_page_config(text: str) -> PageConfig:
    return merge(extract_hints(text, SUMMARY_RULES), SUMMARY_BASE).page_config


def extract_capture_strategy(text: str) -> CaptureStrategy:
    return merge(extract_hints(text, SUMMARY_RULES), SUMMARY_BASE).capture_strategy


def extract_insights(text: str) -> dict:
    """Informational summary of the advice.

    An embedded JSON object is returned as-is; otherwise the summary-pass
    page and capture settings plus the first SUMMARY_LENGTH characters.
    """
    try:
        structured = find_json_object(text)
        if structured is not None:
            return structured

        return {
            "pageConfig": extract_page_config(text).to_dict(),
            "captureStrategy": extract_capture_strategy(text).to_dict(),
            "summary": text[:SUMMARY_LENGTH] + "...",
        }
    except Exception as e:
        logger.warning("Could not extract insights from advice: %s", e)
        return {"summary": "Advice processed with default configuration"}


def extract_recommendations(text: str) -> Recommendation:
    """Recommendation that drives rendering, built from keyword hints."""
    try:
        return merge(extract_hints(text, RECOMMENDATION_RULES), default_recommendation())
    except Exception as e:
        logger.warning("Could not extract recommendations from advice: %s", e)
        return default_recommendation()
