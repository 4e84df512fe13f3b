"""
PDF inspection helpers for exported payloads.

Helper functions:
    page_count: Quick page count without full extraction.
    extract_text: Plain text of every page, joined by newlines.
"""

from io import BytesIO
from typing import Optional

import pdfplumber


def page_count(pdf_bytes: bytes) -> Optional[int]:
    """Get page count from an in-memory PDF, or None if unreadable."""
    try:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            return len(pdf.pages)
    except Exception:
        return None


def extract_text(pdf_bytes: bytes) -> str:
    """Extract the text layer of an in-memory PDF, one page after another."""
    with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
        return "\n".join(page.extract_text() or "" for page in pdf.pages)
