"""
PDF Service - HTTP front end for chromepdf.

Converts HTML or URLs to PDF using Playwright/Chromium. Run with:
    uvicorn pdf_service.app:app --port 8001
"""

__version__ = "0.1.0"
