"""
Fluent builder over PDFOptions.

Usage:
    pdf = (
        with_options()
        .landscape()
        .format("Tabloid")
        .margins(0.5, 0.5, 0.5, 0.5)
        .generate(html)
    )
"""

from typing import Optional, Union

from .config import ChromePDFSettings
from .generator import Generator
from .options import PaperFormat, PDFOptions, default_options


class OptionsBuilder:
    """Builds a PDFOptions record one setting at a time."""

    def __init__(self, options: Optional[PDFOptions] = None):
        self._options = options if options is not None else default_options()

    @property
    def options(self) -> PDFOptions:
        return self._options

    def format(self, fmt: Union[PaperFormat, str]) -> "OptionsBuilder":
        """Set the paper format (A4, A3, Letter, Legal, Tabloid)."""
        self._options.format = fmt
        return self

    def size(self, width: float, height: float) -> "OptionsBuilder":
        """Set a custom paper size in inches. Clears any named format."""
        checked = PDFOptions(width=width, height=height)
        self._options.width = checked.width
        self._options.height = checked.height
        self._options.format = None
        return self

    def margins(self, top: float, bottom: float, left: float, right: float) -> "OptionsBuilder":
        """Set all margins in inches. Nothing changes if any value is invalid."""
        checked = PDFOptions(
            margin_top=top, margin_bottom=bottom, margin_left=left, margin_right=right
        )
        self._options.margin_top = checked.margin_top
        self._options.margin_bottom = checked.margin_bottom
        self._options.margin_left = checked.margin_left
        self._options.margin_right = checked.margin_right
        return self

    def landscape(self) -> "OptionsBuilder":
        self._options.landscape = True
        return self

    def portrait(self) -> "OptionsBuilder":
        self._options.landscape = False
        return self

    def scale(self, value: float) -> "OptionsBuilder":
        """Set the rendering scale (0.1 to 2.0)."""
        self._options.scale = value
        return self

    def print_background(self, enable: bool) -> "OptionsBuilder":
        self._options.print_background = enable
        return self

    def header_footer(self, header: str, footer: str) -> "OptionsBuilder":
        """Enable the header and footer with the given HTML templates."""
        self._options.display_header_footer = True
        self._options.header_template = header
        self._options.footer_template = footer
        return self

    def wait_for(self, selector: str) -> "OptionsBuilder":
        """Wait for a CSS selector to become visible before printing."""
        self._options.wait_for_selector = selector
        return self

    def wait_time(self, seconds: float) -> "OptionsBuilder":
        """Additional settle time before printing."""
        self._options.wait_time = seconds
        return self

    def timeout(self, seconds: float) -> "OptionsBuilder":
        """Upper bound for the whole browser session."""
        self._options.timeout = seconds
        return self

    def build(self, settings: Optional[ChromePDFSettings] = None) -> Generator:
        """Create a Generator with the configured options."""
        return Generator(self._options, settings=settings)

    def generate(self, html_content: str) -> bytes:
        return self.build().from_html(html_content)

    def generate_from_url(self, url: str) -> bytes:
        return self.build().from_url(url)

    async def generate_async(self, html_content: str) -> bytes:
        return await self.build().from_html_async(html_content)

    async def generate_from_url_async(self, url: str) -> bytes:
        return await self.build().from_url_async(url)


def with_options() -> OptionsBuilder:
    """Start a builder seeded with the default options."""
    return OptionsBuilder()
