"""
PDF Service - FastAPI application for PDF generation.

Exposes chromepdf over HTTP: HTML (with optional CSS) or a URL in,
PDF bytes out, rendered by Playwright/Chromium.
"""

import asyncio
import logging
from datetime import datetime, timezone
from io import BytesIO
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from chromepdf import Generator, PDFGenerationError, PDFOptions, RenderTimeoutError
from chromepdf.config import get_settings
from chromepdf.logger import setup_logging

from .pdf_helpers import build_html_document, pdf_filename

settings = get_settings()
setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PDF Service",
    version="0.1.0",
    description="HTML and URL to PDF conversion using Playwright/Chromium"
)

MAX_CONCURRENT_PDFS = settings.max_concurrent_renders

# Semaphore for rate limiting
_pdf_semaphore = asyncio.Semaphore(MAX_CONCURRENT_PDFS)

# Browser readiness state
_browser_ready = False
_browser_error: Optional[str] = None

_PROBE_HTML = "<html><body><h1>Test</h1></body></html>"


# ============================================================================
# Startup Event - Validate Chromium
# ============================================================================

@app.on_event("startup")
async def validate_browser_on_startup():
    """
    Render a tiny document on startup so the service won't report healthy
    if Chromium can't actually generate PDFs.
    """
    global _browser_ready, _browser_error

    logger.info("PDF Service starting - validating Chromium...")

    probe = Generator(PDFOptions(wait_time=0, timeout=30), settings=settings)
    try:
        test_pdf = await probe.from_html_async(_PROBE_HTML)
    except PDFGenerationError as e:
        _browser_error = str(e)
        logger.error(f"Chromium validation failed: {_browser_error}")
        logger.error("PDF generation will not work until this is resolved.")
        return

    if len(test_pdf) > 0:
        _browser_ready = True
        _browser_error = None
        logger.info(f"Chromium validation successful - generated {len(test_pdf)} byte test PDF")
    else:
        _browser_error = "Test PDF generation returned empty result"
        logger.error(f"Chromium validation failed: {_browser_error}")


# ============================================================================
# Request/Response Models
# ============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    timestamp: datetime
    active_renders: int
    max_concurrent: int
    browser_ready: bool = True
    browser_error: Optional[str] = None


class RenderPDFRequest(BaseModel):
    """HTML/CSS to PDF request."""
    html: str = Field(..., description="HTML content to render")
    css: Optional[str] = Field(None, description="Additional CSS styles")
    options: PDFOptions = Field(default_factory=PDFOptions, description="Rendering options")
    title: Optional[str] = Field(None, description="Title used for the download filename")


class RenderURLRequest(BaseModel):
    """URL to PDF request."""
    url: str = Field(..., description="URL of the page to render")
    options: PDFOptions = Field(default_factory=PDFOptions, description="Rendering options")
    title: Optional[str] = Field(None, description="Title used for the download filename")


# ============================================================================
# Health Check Endpoint
# ============================================================================

def _active_renders() -> int:
    return MAX_CONCURRENT_PDFS - _pdf_semaphore._value


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint for container orchestration.

    Returns HTTP 503 if the startup probe could not render a PDF.
    """
    if not _browser_ready:
        raise HTTPException(
            status_code=503,
            detail={
                "status": "unhealthy",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "active_renders": _active_renders(),
                "max_concurrent": MAX_CONCURRENT_PDFS,
                "browser_ready": False,
                "browser_error": _browser_error,
                "message": "PDF service is unhealthy - Chromium not available"
            }
        )

    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        active_renders=_active_renders(),
        max_concurrent=MAX_CONCURRENT_PDFS,
        browser_ready=True,
        browser_error=None
    )


# ============================================================================
# PDF Generation Endpoints
# ============================================================================

def _check_capacity() -> None:
    if _pdf_semaphore._value <= 0:
        logger.warning("PDF service overloaded, rejecting request")
        raise HTTPException(
            status_code=503,
            detail="Service overloaded. Too many concurrent PDF operations."
        )


def _pdf_response(pdf_bytes: bytes, filename: str) -> StreamingResponse:
    return StreamingResponse(
        BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"'
        }
    )


async def _render(generator_call, options: PDFOptions) -> bytes:
    try:
        return await generator_call
    except RenderTimeoutError:
        raise HTTPException(
            status_code=500,
            detail=f"Rendering timed out after {options.timeout}s"
        )
    except PDFGenerationError as e:
        raise HTTPException(
            status_code=500,
            detail=f"Rendering failed: {e}"
        )


@app.post("/render-pdf")
async def render_pdf(request: RenderPDFRequest):
    """
    HTML/CSS to PDF endpoint.

    Raises:
        HTTPException: 400 for empty HTML, 500 for rendering failures, 503 for overload
    """
    if not request.html or not request.html.strip():
        raise HTTPException(status_code=400, detail="HTML content is required")

    _check_capacity()

    async with _pdf_semaphore:
        logger.info(f"Starting HTML PDF render (format={request.options.format})")

        generator = Generator(request.options, settings=settings)
        full_html = build_html_document(request.html, request.css)
        pdf_bytes = await _render(generator.from_html_async(full_html), request.options)

        logger.info("HTML PDF render completed successfully")
        return _pdf_response(pdf_bytes, pdf_filename(title=request.title))


@app.post("/render-url")
async def render_url(request: RenderURLRequest):
    """
    URL to PDF endpoint.

    Raises:
        HTTPException: 400 for non-http(s) URLs, 500 for rendering failures, 503 for overload
    """
    if not request.url.startswith(("http://", "https://")):
        raise HTTPException(status_code=400, detail="URL must start with http:// or https://")

    _check_capacity()

    async with _pdf_semaphore:
        logger.info(f"Starting URL PDF render: {request.url}")

        generator = Generator(request.options, settings=settings)
        pdf_bytes = await _render(generator.from_url_async(request.url), request.options)

        logger.info("URL PDF render completed successfully")
        return _pdf_response(pdf_bytes, pdf_filename(title=request.title, url=request.url))
