"""
Exceptions raised by chromepdf.

Browser-side failures are wrapped once with a short prefix and chained
to the original Playwright exception. Nothing is retried.
"""


class ChromePDFError(Exception):
    """Base class for all chromepdf errors."""


class PDFGenerationError(ChromePDFError):
    """
    A conversion failed inside the browser session.

    Attributes:
        source: "html" or "url", the kind of input being converted
    """

    def __init__(self, message: str, source: str = "html"):
        super().__init__(message)
        self.source = source

    @classmethod
    def wrap(cls, exc: BaseException, source: str) -> "PDFGenerationError":
        prefix = "failed to generate PDF from URL" if source == "url" else "failed to generate PDF"
        detail = str(exc) or type(exc).__name__
        return cls(f"{prefix}: {detail}", source=source)


class RenderTimeoutError(PDFGenerationError):
    """The browser session exceeded the configured timeout."""
