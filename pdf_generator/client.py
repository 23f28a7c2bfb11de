#!/usr/bin/env python3
"""
Client for the PDF generation API.

Usage:
    pdf-client <url> [output-file] [api-url]

Examples:
    pdf-client https://github.com
    pdf-client https://aws.amazon.com aws-docs.pdf
    pdf-client https://example.com output.pdf https://your-api-url

The API URL falls back to the PDF_API_URL environment variable.
"""

import argparse
import base64
import json
import re
import sys
import time
from pathlib import Path

import requests

from pdf_generator.config import PDF_API_URL

REQUEST_TIMEOUT_SECS = 120


class PdfClientError(Exception):
    """The API did not return a generated PDF."""


class PdfGeneratorClient:
    def __init__(self, api_url: str, timeout: float = REQUEST_TIMEOUT_SECS):
        self.api_url = api_url
        self.timeout = timeout

    def generate_pdf(self, url: str, **options) -> dict:
        """POST the URL to the API and return the decoded JSON response."""
        print(f"Generating PDF for: {url}")
        print(f"API URL: {self.api_url}")

        payload = {"url": url, **options}
        try:
            response = requests.post(
                self.api_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            print(f"✗ Request failed: {e}")
            raise PdfClientError(str(e)) from e

        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.ok or not data.get("success"):
            print(f"✗ Request failed: HTTP {response.status_code}")
            if data:
                print(f"  Error details: {json.dumps(data, indent=2)}")
            raise PdfClientError(data.get("message") or data.get("error") or "PDF generation failed")

        print("✓ PDF generated")
        print(f"  Size: {data.get('fileSize')} bytes")
        print(f"  Assistant insights: {json.dumps(data.get('qInsights'), indent=2)}")
        return data

    def save_pdf(self, url: str, output_path, **options) -> dict:
        """Generate a PDF and write it to ``output_path``."""
        result = self.generate_pdf(url, **options)

        pdf = base64.b64decode(result["pdfBase64"])
        output_path = Path(output_path)
        output_path.write_bytes(pdf)

        print(f"✓ PDF saved to: {output_path}")

        return {
            "file_path": str(output_path),
            "file_size": len(pdf),
            "q_insights": result.get("qInsights"),
        }


def generate_output_filename(url: str) -> str:
    """Filename derived from the URL, e.g. pdf_example_com_1700000000000.pdf."""
    domain = re.sub(r"https?://", "", url)
    domain = re.sub(r"[^a-zA-Z0-9]", "_", domain)
    return f"pdf_{domain}_{int(time.time() * 1000)}.pdf"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="pdf-client",
        description="Convert a web page to PDF through the generation API.",
    )
    parser.add_argument("url", nargs="?", help="Page to convert")
    parser.add_argument("output", nargs="?", help="Output file (default: derived from URL)")
    parser.add_argument("api_url", nargs="?", help=f"API endpoint (default: {PDF_API_URL})")
    args = parser.parse_args(argv)

    if not args.url:
        parser.print_help()
        return 1

    output = args.output or generate_output_filename(args.url)
    client = PdfGeneratorClient(args.api_url or PDF_API_URL)

    try:
        client.save_pdf(args.url, output)
    except (PdfClientError, KeyError, ValueError, OSError) as e:
        print(f"\n✗ Conversion failed: {e}")
        return 1

    print(f"\nDone. File: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
