"""PDF generator configuration: loaded from environment variables."""

import os
import shlex
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# AWS region handed to the advice command's environment
AWS_REGION = os.environ.get("AWS_REGION", "us-east-1")

# Advice source (command-line assistant); the prompt is appended as last arg
ADVICE_COMMAND = tuple(shlex.split(os.environ.get("ADVICE_COMMAND", "aws q ask")))
ADVICE_TIMEOUT_SECS = float(os.environ.get("ADVICE_TIMEOUT_SECS", "30"))

# Headless Chromium (empty = Playwright's bundled browser)
CHROMIUM_PATH = os.environ.get("CHROMIUM_PATH", "")

# Server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# CLI default endpoint
PDF_API_URL = os.environ.get(
    "PDF_API_URL",
    "https://your-api-id.execute-api.us-east-1.amazonaws.com/dev/generate-pdf",
)
