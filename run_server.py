#!/usr/bin/env python3
"""Site to PDF Generator: HTTP server.

Launch: python3 run_server.py
Serves at http://0.0.0.0:8000 (or PORT env var)
"""

import logging
import shutil

import uvicorn

from pdf_generator.config import ADVICE_COMMAND, HOST, LOG_LEVEL, PORT


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 60)
    print("  Site to PDF Generator")
    print("=" * 60)

    # Advice is optional; conversions fall back to default settings without it
    if ADVICE_COMMAND and not shutil.which(ADVICE_COMMAND[0]):
        print(f"\n  WARNING: advice command '{ADVICE_COMMAND[0]}' not found on PATH.")
        print("  PDFs will be rendered with the default configuration.\n")

    print(f"Starting server on {HOST}:{PORT}")
    print(f"\n  Endpoint: http://{HOST}:{PORT}/generate-pdf")
    print("  Press Ctrl+C to stop\n")

    from pdf_generator.app import create_app
    app = create_app()
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
