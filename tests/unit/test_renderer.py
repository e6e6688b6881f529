"""Unit tests for the render-to-PDF orchestrator using a fake browser."""

import asyncio

import pytest

from cvpress.contexts.rendering import renderer
from cvpress.contexts.rendering.exceptions import RenderError
from cvpress.contexts.rendering.renderer import PdfOptions, render_to_pdf

FAKE_PDF = b"%PDF-1.7\n%fake\n"


class FakePage:
    def __init__(self, fail_on=None, hang=False, pdf_bytes=FAKE_PDF):
        self.fail_on = fail_on
        self.hang = hang
        self.pdf_bytes = pdf_bytes
        self.closed = False
        self.content = None
        self.wait_until = None
        self.pdf_options = None

    async def set_content(self, html, wait_until=None, timeout=None):
        if self.hang:
            await asyncio.sleep(10)
        if self.fail_on == "load":
            raise RuntimeError("navigation failed")
        self.content = html
        self.wait_until = wait_until

    async def pdf(self, **options):
        if self.fail_on == "capture":
            raise RuntimeError("printing failed")
        self.pdf_options = options
        return self.pdf_bytes

    async def close(self):
        self.closed = True


class FakeBrowser:
    def __init__(self, page):
        self.page = page
        self.closed = False

    async def new_page(self):
        if self.page.fail_on == "page":
            raise RuntimeError("target closed")
        return self.page

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, browser, fail_launch=False):
        self.browser = browser
        self.fail_launch = fail_launch
        self.launch_kwargs = None

    async def launch(self, **kwargs):
        if self.fail_launch:
            raise RuntimeError("executable doesn't exist")
        self.launch_kwargs = kwargs
        return self.browser


class FakePlaywright:
    def __init__(self, chromium):
        self.chromium = chromium

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


@pytest.fixture
def fake_browser(monkeypatch):
    """Install a fake Playwright and return a factory configuring it."""

    def install(fail_on=None, hang=False, fail_launch=False, pdf_bytes=FAKE_PDF):
        page = FakePage(fail_on=fail_on, hang=hang, pdf_bytes=pdf_bytes)
        browser = FakeBrowser(page)
        chromium = FakeChromium(browser, fail_launch=fail_launch)
        monkeypatch.setattr(renderer, "async_playwright", lambda: FakePlaywright(chromium))
        return chromium, browser, page

    return install


@pytest.mark.unit
def test_render_protocol(fake_browser):
    chromium, browser, page = fake_browser()

    pdf_bytes = asyncio.run(render_to_pdf("<html></html>"))

    assert pdf_bytes == FAKE_PDF
    assert chromium.launch_kwargs["headless"] is True
    assert "--no-sandbox" in chromium.launch_kwargs["args"]
    assert page.content == "<html></html>"
    assert page.wait_until == "networkidle"
    assert page.pdf_options == {
        "format": "A4",
        "print_background": True,
        "margin": {"top": "20px", "right": "20px", "bottom": "20px", "left": "20px"},
    }
    assert page.closed and browser.closed


@pytest.mark.unit
@pytest.mark.parametrize("stage", ["page", "load", "capture"])
def test_stage_failure_releases_browser(fake_browser, stage):
    _, browser, page = fake_browser(fail_on=stage)

    with pytest.raises(RenderError) as exc_info:
        asyncio.run(render_to_pdf("<html></html>"))

    assert exc_info.value.stage == stage
    assert browser.closed
    if stage != "page":
        assert page.closed


@pytest.mark.unit
def test_launch_failure(fake_browser):
    _, browser, _ = fake_browser(fail_launch=True)

    with pytest.raises(RenderError) as exc_info:
        asyncio.run(render_to_pdf("<html></html>"))

    assert exc_info.value.stage == "launch"
    assert isinstance(exc_info.value.original_error, RuntimeError)
    assert not browser.closed


@pytest.mark.unit
def test_timeout_cancels_and_releases(fake_browser):
    _, browser, page = fake_browser(hang=True)

    with pytest.raises(RenderError) as exc_info:
        asyncio.run(render_to_pdf("<html></html>", timeout_s=0.05))

    assert exc_info.value.stage == "timeout"
    assert page.closed and browser.closed


@pytest.mark.unit
def test_invalid_pdf_output(fake_browser):
    fake_browser(pdf_bytes=b"")

    with pytest.raises(RenderError) as exc_info:
        asyncio.run(render_to_pdf("<html></html>"))

    assert exc_info.value.stage == "capture"


@pytest.mark.unit
def test_custom_pdf_options(fake_browser):
    _, _, page = fake_browser()
    options = PdfOptions(format="Letter", margin={"top": "1in", "right": "1in", "bottom": "1in", "left": "1in"})

    asyncio.run(render_to_pdf("<html></html>", pdf_options=options))

    assert page.pdf_options["format"] == "Letter"
    assert page.pdf_options["margin"]["top"] == "1in"
