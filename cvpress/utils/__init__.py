"""
Shared utilities for CVPRESS.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps for log directories
- PDF inspection
"""

from cvpress.utils.pdf_processing import page_count
from cvpress.utils.timestamp import now

__all__ = ["page_count", "now"]
