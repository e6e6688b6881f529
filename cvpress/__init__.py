"""
CVPRESS - Content-to-Visual Print Rendering for Employment Summaries

Turns structured resume content and a visual template descriptor into a
styled, self-contained HTML document and prints it to PDF with a headless browser.

Architecture:
- Templating Context: Markup transcoding, spacing, stylesheet and document composition
- Rendering Context: Headless browser orchestration and PDF capture
- Serving Context: Request validation, generation pipeline and HTTP surface
"""

__version__ = "0.1.0"
