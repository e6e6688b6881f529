"""
PDF processing utilities.

Helper functions:
    page_count: Quick page count of an in-memory PDF.
    is_pdf: Magic-number check for PDF byte buffers.
"""

from io import BytesIO
from typing import Optional

from PyPDF2 import PdfReader

PDF_MAGIC = b"%PDF-"


def is_pdf(data: bytes) -> bool:
    """Check whether a byte buffer starts with the PDF header."""
    return bool(data) and data[: len(PDF_MAGIC)] == PDF_MAGIC


def page_count(pdf_bytes: bytes) -> Optional[int]:
    """Get page count from PDF bytes, or None if unreadable."""
    if not is_pdf(pdf_bytes):
        return None
    try:
        reader = PdfReader(BytesIO(pdf_bytes))
        return len(reader.pages)
    except Exception:
        return None
