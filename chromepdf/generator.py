"""
PDF generator - drives Chromium through Playwright.

Each conversion is one sequential browser session:
navigate -> wait for body -> wait conditions -> print to PDF -> close.
"""

import asyncio
import uuid
from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from .config import ChromePDFSettings, get_settings
from .errors import PDFGenerationError, RenderTimeoutError
from .logger import get_logger
from .options import DEFAULT_SETTLE_SECONDS, PDFOptions, default_options


class Generator:
    """Generate PDFs from HTML content or URLs with a fixed set of options."""

    def __init__(
        self,
        options: Optional[PDFOptions] = None,
        settings: Optional[ChromePDFSettings] = None
    ):
        self.options = options if options is not None else default_options()
        self.settings = settings if settings is not None else get_settings()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def from_html_async(self, html_content: str) -> bytes:
        """
        Generate a PDF from an HTML string.

        Args:
            html_content: Complete or partial HTML document

        Returns:
            Raw PDF bytes

        Raises:
            RenderTimeoutError: If the session exceeds options.timeout
            PDFGenerationError: If the browser reports a failure
        """
        return await self._generate(html_content, source="html")

    async def from_url_async(self, url: str) -> bytes:
        """Generate a PDF from a URL. Raises the same errors as from_html_async."""
        return await self._generate(url, source="url")

    def from_html(self, html_content: str) -> bytes:
        """Blocking variant of from_html_async. Must not be called from a running event loop."""
        return asyncio.run(self.from_html_async(html_content))

    def from_url(self, url: str) -> bytes:
        """Blocking variant of from_url_async. Must not be called from a running event loop."""
        return asyncio.run(self.from_url_async(url))

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    async def _generate(self, target: str, source: str) -> bytes:
        log = get_logger(__name__, render_id=uuid.uuid4().hex)
        log.info(f"Starting PDF render (source={source}, timeout={self.options.timeout}s)")

        try:
            pdf_bytes = await asyncio.wait_for(
                self._run_session(target, source, log),
                timeout=self.options.timeout
            )
        except (asyncio.TimeoutError, PlaywrightTimeoutError) as e:
            log.error(f"PDF render timed out after {self.options.timeout}s")
            raise RenderTimeoutError.wrap(e, source) from e
        except PlaywrightError as e:
            log.error(f"PDF render failed: {e}")
            raise PDFGenerationError.wrap(e, source) from e

        log.info(f"PDF render completed: {len(pdf_bytes)} bytes")
        return pdf_bytes

    async def _run_session(self, target: str, source: str, log) -> bytes:
        async with async_playwright() as p:
            browser = await self._open_browser(p, log)
            try:
                context = await browser.new_context()
                try:
                    page = await context.new_page()
                    page.set_default_timeout(self.options.timeout * 1000)

                    if source == "url":
                        log.debug(f"Navigating to {target}")
                        await page.goto(target)
                    else:
                        log.debug(f"Loading {len(target)} chars of HTML")
                        await page.set_content(target)

                    await page.wait_for_selector("body", state="attached")
                    await self._wait_for_conditions(page, log)

                    params = self.options.to_print_params()
                    log.debug(f"Printing to PDF with {params}")
                    return await page.pdf(**params)
                finally:
                    await context.close()
            finally:
                await browser.close()

    async def _open_browser(self, p, log):
        chromium = p.chromium
        if self.settings.cdp_endpoint:
            log.debug(f"Connecting to browser at {self.settings.cdp_endpoint}")
            return await chromium.connect_over_cdp(self.settings.cdp_endpoint)

        launch_kwargs = {
            "headless": self.settings.headless,
            "args": self.settings.launch_args_list,
        }
        if self.settings.executable_path:
            launch_kwargs["executable_path"] = self.settings.executable_path
        log.debug(f"Launching Chromium (headless={self.settings.headless})")
        return await chromium.launch(**launch_kwargs)

    async def _wait_for_conditions(self, page, log) -> None:
        """Wait for the configured selector and/or settle time before printing."""
        waited = False

        if self.options.wait_for_selector:
            log.debug(f"Waiting for selector {self.options.wait_for_selector!r}")
            await page.wait_for_selector(self.options.wait_for_selector, state="visible")
            waited = True

        if self.options.wait_time > 0:
            await page.wait_for_timeout(self.options.wait_time * 1000)
            waited = True

        if not waited:
            await page.wait_for_timeout(DEFAULT_SETTLE_SECONDS * 1000)


# Convenience functions for common use cases

def from_html(html_content: str) -> bytes:
    """Convert HTML to PDF with default options."""
    return Generator(default_options()).from_html(html_content)


def from_url(url: str) -> bytes:
    """Convert a URL to PDF with default options."""
    return Generator(default_options()).from_url(url)


async def from_html_async(html_content: str) -> bytes:
    return await Generator(default_options()).from_html_async(html_content)


async def from_url_async(url: str) -> bytes:
    return await Generator(default_options()).from_url_async(url)
