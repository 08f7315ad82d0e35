"""
Global fixtures for chromepdf and pdf_service tests.

No test launches a real browser: async_playwright is replaced with a mock
whose page returns fake PDF bytes.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

FAKE_PDF = b"%PDF-1.4 fake pdf content"


def make_playwright_mock(pdf_bytes: bytes = FAKE_PDF) -> SimpleNamespace:
    """
    Build a mock of the async_playwright() entry point.

    Chain: async_playwright() -> p.chromium.launch() -> browser.new_context()
    -> context.new_page() -> page.pdf()
    """
    page = AsyncMock()
    # set_default_timeout is synchronous in Playwright's async API
    page.set_default_timeout = MagicMock()
    page.pdf = AsyncMock(return_value=pdf_bytes)

    context = AsyncMock()
    context.new_page = AsyncMock(return_value=page)

    browser = AsyncMock()
    browser.new_context = AsyncMock(return_value=context)

    chromium = MagicMock()
    chromium.launch = AsyncMock(return_value=browser)
    chromium.connect_over_cdp = AsyncMock(return_value=browser)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=MagicMock(chromium=chromium))
    manager.__aexit__ = AsyncMock(return_value=False)

    return SimpleNamespace(
        async_playwright=MagicMock(return_value=manager),
        chromium=chromium,
        browser=browser,
        context=context,
        page=page,
        pdf_bytes=pdf_bytes,
    )


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep host CHROMEPDF_* variables out of the settings under test."""
    for name in (
        "CHROMEPDF_HEADLESS",
        "CHROMEPDF_EXECUTABLE_PATH",
        "CHROMEPDF_LAUNCH_ARGS",
        "CHROMEPDF_CDP_ENDPOINT",
        "CHROMEPDF_LOG_LEVEL",
        "CHROMEPDF_LOG_FORMAT",
        "CHROMEPDF_MAX_CONCURRENT_RENDERS",
    ):
        monkeypatch.delenv(name, raising=False)

    from chromepdf.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_playwright():
    """Patch async_playwright in the generator and expose the mock chain."""
    mocks = make_playwright_mock()
    with patch("chromepdf.generator.async_playwright", mocks.async_playwright):
        yield mocks
