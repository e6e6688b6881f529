"""
Rendering Context

Responsibilities:
- Launches a headless Chromium instance per render
- Loads composed HTML and waits for the page to settle
- Captures the page as an A4 PDF
- Releases browser resources on success and failure

Owns: Headless browser orchestration, PDF capture
Never: Modifies document content
"""

from cvpress.contexts.rendering.exceptions import RenderError
from cvpress.contexts.rendering.renderer import PdfOptions, render_to_pdf

__all__ = ["RenderError", "PdfOptions", "render_to_pdf"]
