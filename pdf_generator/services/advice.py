"""Advice source: asks a command-line AI assistant how to render a page.

The assistant (``aws q ask`` by default) runs as a one-shot subprocess with a
hard timeout. Failure of any kind degrades to the default Recommendation.
"""

from __future__ import annotations

import logging
import os
import subprocess

from pdf_generator.errors import AdviceUnavailable
from pdf_generator.models import Insights
from pdf_generator.services.hints import extract_insights, extract_recommendations
from pdf_generator.services.recommendations import default_recommendation

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = ("aws", "q", "ask")
DEFAULT_TIMEOUT_SECS = 30

UNAVAILABLE_RAW = "advice unavailable"
UNAVAILABLE_SUMMARY = "Using default configuration"

PROMPT_TEMPLATE = """I need to convert the website {url} to PDF in an optimized way.

Analyze it and give recommendations on:
1. Ideal page settings (size, orientation, margins)
2. Strategies for capturing dynamic content
3. Performance optimizations
4. Handling of specific elements (images, tables, charts)
5. Likely technical challenges

Reply in JSON with the following keys:
- pageConfig: {{size, orientation, margins}}
- captureStrategy: {{waitTime, javascript, images}}
- optimizations: [list of optimizations]
- challenges: [likely challenges]"""


def build_prompt(url: str) -> str:
    return PROMPT_TEMPLATE.format(url=url)


class AdviceClient:
    """Runs the advice command once per prompt.

    Args:
        command: argv prefix; the prompt is appended as the final argument.
        timeout: seconds before the child is killed.
        region: AWS region exported to the child as AWS_REGION.
    """

    def __init__(
        self,
        command: tuple[str, ...] = DEFAULT_COMMAND,
        timeout: float = DEFAULT_TIMEOUT_SECS,
        region: str | None = None,
    ):
        self.command = tuple(command)
        self.timeout = timeout
        self.region = region

    def _env(self) -> dict[str, str]:
        env = dict(os.environ)
        if self.region:
            env["AWS_REGION"] = self.region
            env["AWS_DEFAULT_REGION"] = self.region
        return env

    def get_advice(self, prompt: str) -> str:
        """Return the assistant's stdout. Raises AdviceUnavailable on failure."""
        if not self.command:
            raise AdviceUnavailable("no advice command configured")

        cmd = [*self.command, prompt]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                env=self._env(),
            )
        except subprocess.TimeoutExpired:
            raise AdviceUnavailable("timeout")
        except OSError as e:
            raise AdviceUnavailable(f"could not start {cmd[0]}: {e}")

        if result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip()[-500:]
            raise AdviceUnavailable(f"exit {result.returncode}: {detail}")

        return result.stdout.strip()


def consult(url: str, advisor: AdviceClient) -> Insights:
    """Ask for rendering advice about ``url``; never raises."""
    logger.info("Consulting advice source for %s", url)
    try:
        raw = advisor.get_advice(build_prompt(url))
    except AdviceUnavailable as e:
        logger.warning("Advice source unavailable, using default configuration: %s", e.reason)
        return Insights(
            raw=UNAVAILABLE_RAW,
            summary=UNAVAILABLE_SUMMARY,
            recommendation=default_recommendation(),
        )

    return Insights(
        raw=raw,
        summary=extract_insights(raw),
        recommendation=extract_recommendations(raw),
    )
