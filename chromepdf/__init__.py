"""
chromepdf - HTML and URL to PDF conversion using Playwright/Chromium.

The browser does all rendering, layout and PDF encoding; this package
configures the print settings and drives the session.
"""

from .builder import OptionsBuilder, with_options
from .errors import ChromePDFError, PDFGenerationError, RenderTimeoutError
from .generator import Generator, from_html, from_html_async, from_url, from_url_async
from .options import PAPER_SIZES, PaperFormat, PDFOptions, default_options

__version__ = "0.1.0"

__all__ = [
    "ChromePDFError",
    "Generator",
    "OptionsBuilder",
    "PAPER_SIZES",
    "PDFGenerationError",
    "PDFOptions",
    "PaperFormat",
    "RenderTimeoutError",
    "default_options",
    "from_html",
    "from_html_async",
    "from_url",
    "from_url_async",
    "with_options",
]
