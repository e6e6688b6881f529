"""
HTML to PDF Rendering Module

Prints composed HTML documents to PDF with headless Chromium via Playwright.

Every call launches its own browser instance and closes it again, so concurrent
renders never share a process. There is no pooling: each render pays the full
browser start-up cost in exchange for complete isolation.
"""

import asyncio
import os
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dotenv import load_dotenv
from playwright.async_api import Browser, Page, async_playwright

from cvpress.contexts.rendering.exceptions import RenderError
from cvpress.contexts.rendering.logger import (
    _log_warning,
    log_render_result,
    log_render_start,
    log_stage,
)
from cvpress.utils.pdf_processing import is_pdf

load_dotenv()

RENDER_TIMEOUT_S = float(os.getenv("RENDER_TIMEOUT_S", "60"))

# The browser's own OS sandbox cannot start inside most containers
BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

# Page is considered settled once no network requests are in flight
LOAD_STATE = "networkidle"


@dataclass
class PdfOptions:
    """
    Page geometry for PDF capture.

    Attributes:
        format: Paper format name
        print_background: Include background colors and images
        margin: CSS margin per side
    """

    format: str = "A4"
    print_background: bool = True
    margin: Dict[str, str] = field(
        default_factory=lambda: {"top": "20px", "right": "20px", "bottom": "20px", "left": "20px"}
    )

    def to_playwright(self) -> dict:
        return {
            "format": self.format,
            "print_background": self.print_background,
            "margin": dict(self.margin),
        }


async def _close_page(page: Optional[Page]) -> None:
    if page is None:
        return
    try:
        await page.close()
    except Exception as e:
        _log_warning(f"Failed to close page: {e}")


async def _close_browser(browser: Optional[Browser]) -> None:
    if browser is None:
        return
    try:
        await browser.close()
    except Exception as e:
        _log_warning(f"Failed to close browser: {e}")


async def _render(
    html: str,
    pdf_options: PdfOptions,
    timeout_s: float,
    browser_args: List[str],
) -> bytes:
    """
    Run the render protocol: launch, open page, load and settle, capture.

    The page and browser are closed on every path, including cancellation.
    """
    stage = "launch"
    try:
        async with async_playwright() as playwright:
            log_stage(stage)
            browser = await playwright.chromium.launch(headless=True, args=browser_args)
            page = None
            try:
                stage = "page"
                log_stage(stage)
                page = await browser.new_page()

                stage = "load"
                log_stage(stage)
                await page.set_content(html, wait_until=LOAD_STATE, timeout=timeout_s * 1000)

                stage = "capture"
                log_stage(stage)
                pdf_bytes = await page.pdf(**pdf_options.to_playwright())
            finally:
                await _close_page(page)
                await _close_browser(browser)
    except RenderError:
        raise
    except Exception as e:
        raise RenderError(f"Browser failed during {stage}", stage=stage, original_error=e) from e

    if not is_pdf(pdf_bytes):
        raise RenderError("Browser returned an empty or invalid PDF", stage="capture")

    return pdf_bytes


async def render_to_pdf(
    html: str,
    pdf_options: Optional[PdfOptions] = None,
    timeout_s: float = RENDER_TIMEOUT_S,
    browser_args: Optional[List[str]] = None,
) -> bytes:
    """
    Render an HTML document to PDF bytes.

    Launch, content load, and capture each yield to the event loop, so many
    renders can be in flight at once. The whole render is bounded by
    timeout_s; on expiry it is cancelled and the browser is torn down.

    Args:
        html: Complete HTML document
        pdf_options: Page geometry (default: A4, backgrounds, 20px margins)
        timeout_s: Upper bound for the whole render in seconds
        browser_args: Chromium command-line flags (default: sandbox disabled)

    Returns:
        PDF file contents

    Raises:
        RenderError: If any stage fails or the timeout expires
    """
    pdf_options = pdf_options or PdfOptions()
    browser_args = BROWSER_ARGS if browser_args is None else browser_args

    log_render_start(len(html), timeout_s)
    start_time = time.time()

    try:
        pdf_bytes = await asyncio.wait_for(
            _render(html, pdf_options, timeout_s, browser_args), timeout=timeout_s
        )
    except asyncio.TimeoutError as e:
        error = RenderError(f"Render exceeded {timeout_s}s", stage="timeout", original_error=e)
        log_render_result(False, time.time() - start_time, error=error)
        raise error from e
    except RenderError as e:
        log_render_result(False, time.time() - start_time, error=e)
        raise

    log_render_result(True, time.time() - start_time, pdf_size=len(pdf_bytes))
    return pdf_bytes
