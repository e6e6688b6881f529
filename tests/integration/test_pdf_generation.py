"""
Integration tests for PDF generation - drives a real headless Chromium.
"""

import asyncio
import os
import socket
from pathlib import Path

import pytest

from cvpress.contexts.rendering import RenderError, render_to_pdf
from cvpress.contexts.serving import GenerationRequest, generate_pdf
from cvpress.utils.pdf_processing import is_pdf


def _chromium_available() -> bool:
    """Check whether Playwright has a Chromium build installed."""
    try:
        from playwright.sync_api import sync_playwright
    except ImportError:
        return False
    try:
        with sync_playwright() as playwright:
            return Path(playwright.chromium.executable_path).exists()
    except Exception:
        return False


CHROMIUM_AVAILABLE = os.getenv("CVPRESS_SKIP_BROWSER") is None and _chromium_available()
skip_if_no_chromium = pytest.mark.skipif(
    not CHROMIUM_AVAILABLE,
    reason="Chromium not installed for Playwright - run `playwright install chromium`",
)


@pytest.mark.integration
@pytest.mark.browser
@skip_if_no_chromium
def test_minimal_request_produces_pdf(payload, tmp_path):
    """End-to-end: '# Hi' with one keyword renders to a non-empty PDF."""
    request = GenerationRequest.from_payload(payload)

    result = asyncio.run(generate_pdf(request, artifacts_dir=tmp_path))

    assert is_pdf(result.pdf_bytes)
    assert len(result.pdf_bytes) > 0
    assert result.page_count == 1


@pytest.mark.integration
@pytest.mark.browser
@skip_if_no_chromium
def test_sidebar_request_produces_pdf(payload, tmp_path):
    payload["resumeData"]["template"]["layout"] = "sidebar"
    payload["resumeData"]["content"] = "# Jane Doe\n## Experience\n- Built things\n\nMore text"
    payload["resumeData"]["keywords"] = ["Python", "Playwright", "Flask"]

    result = asyncio.run(generate_pdf(GenerationRequest.from_payload(payload), keep_html=True, artifacts_dir=tmp_path))

    assert is_pdf(result.pdf_bytes)
    assert len(list(tmp_path.glob("modern-blue_*.html"))) == 1


@pytest.mark.integration
@pytest.mark.browser
@skip_if_no_chromium
def test_long_content_spans_pages(payload, tmp_path):
    payload["resumeData"]["content"] = "\n".join(f"- Achievement {i}" for i in range(200))

    result = asyncio.run(generate_pdf(GenerationRequest.from_payload(payload), artifacts_dir=tmp_path))

    assert result.page_count > 1


@pytest.mark.integration
@pytest.mark.browser
@skip_if_no_chromium
def test_unsettled_page_fails_with_render_error():
    """A page whose network never goes idle is cut off by the timeout."""
    # Listening socket that never answers keeps one request in flight
    with socket.socket() as server:
        server.bind(("127.0.0.1", 0))
        server.listen()
        port = server.getsockname()[1]
        html = f'<html><body><img src="http://127.0.0.1:{port}/never.png"></body></html>'

        with pytest.raises(RenderError) as exc_info:
            asyncio.run(render_to_pdf(html, timeout_s=3))

    # The page load wait and the overall deadline share the same budget
    assert exc_info.value.stage in ("load", "timeout")
