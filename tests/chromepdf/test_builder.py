"""
Unit tests for the fluent OptionsBuilder.
"""

import pytest
from pydantic import ValidationError

from chromepdf import Generator, OptionsBuilder, PaperFormat, with_options
from chromepdf.config import ChromePDFSettings


class TestOptionsBuilder:
    """Tests for builder setters."""

    def test_with_options_starts_from_defaults(self):
        builder = with_options()
        assert isinstance(builder, OptionsBuilder)
        assert builder.options.format == PaperFormat.A4
        assert builder.options.timeout == 30.0

    def test_setters_are_chainable(self):
        builder = with_options()
        assert builder.landscape() is builder
        assert builder.scale(1.5) is builder
        assert builder.wait_for("#ready") is builder

    def test_format(self):
        opts = with_options().format("Letter").options
        assert opts.format == PaperFormat.LETTER

    def test_size_clears_format(self):
        opts = with_options().size(8.5, 11).options

        assert opts.format is None
        assert opts.width == 8.5
        assert opts.height == 11
        assert opts.paper_size() == (8.5, 11)

    def test_format_after_size_wins(self):
        opts = with_options().size(8.5, 11).format(PaperFormat.TABLOID).options
        assert opts.paper_size() == (11.0, 17.0)

    def test_margins_order(self):
        opts = with_options().margins(1.0, 2.0, 3.0, 4.0).options

        assert opts.margin_top == 1.0
        assert opts.margin_bottom == 2.0
        assert opts.margin_left == 3.0
        assert opts.margin_right == 4.0

    def test_landscape_then_portrait(self):
        builder = with_options().landscape()
        assert builder.options.landscape is True
        builder.portrait()
        assert builder.options.landscape is False

    def test_print_background(self):
        assert with_options().print_background(False).options.print_background is False

    def test_header_footer_enables_display(self):
        opts = with_options().header_footer("<div>H</div>", "<div>F</div>").options

        assert opts.display_header_footer is True
        assert opts.header_template == "<div>H</div>"
        assert opts.footer_template == "<div>F</div>"

    def test_wait_settings(self):
        opts = with_options().wait_for(".loaded").wait_time(0.25).timeout(10).options

        assert opts.wait_for_selector == ".loaded"
        assert opts.wait_time == 0.25
        assert opts.timeout == 10

    def test_invalid_scale_raises_immediately(self):
        with pytest.raises(ValidationError):
            with_options().scale(5.0)

    def test_negative_wait_time_rejected(self):
        with pytest.raises(ValidationError):
            with_options().wait_time(-1)

    def test_invalid_size_leaves_options_unchanged(self):
        builder = with_options()

        with pytest.raises(ValidationError):
            builder.size(5, -1)

        assert builder.options.width == 0.0
        assert builder.options.height == 0.0
        assert builder.options.format == PaperFormat.A4

    def test_invalid_margin_leaves_margins_unchanged(self):
        builder = with_options().margins(1.0, 1.0, 1.0, 1.0)

        with pytest.raises(ValidationError):
            builder.margins(2.0, 2.0, 2.0, -0.5)

        opts = builder.options
        assert (opts.margin_top, opts.margin_bottom, opts.margin_left, opts.margin_right) == (1.0, 1.0, 1.0, 1.0)


class TestBuilderTerminals:
    """Tests for build() and generate helpers."""

    def test_build_returns_generator_with_options(self):
        settings = ChromePDFSettings()
        builder = with_options().landscape()
        generator = builder.build(settings=settings)

        assert isinstance(generator, Generator)
        assert generator.options is builder.options
        assert generator.settings is settings

    def test_generate(self, mock_playwright):
        pdf = with_options().wait_time(0).generate("<h1>Hi</h1>")

        assert pdf == mock_playwright.pdf_bytes
        mock_playwright.page.set_content.assert_awaited_once_with("<h1>Hi</h1>")

    def test_generate_from_url(self, mock_playwright):
        pdf = with_options().landscape().generate_from_url("https://example.com")

        assert pdf == mock_playwright.pdf_bytes
        mock_playwright.page.goto.assert_awaited_once_with("https://example.com")
        assert mock_playwright.page.pdf.await_args.kwargs["landscape"] is True

    @pytest.mark.asyncio
    async def test_generate_async(self, mock_playwright):
        pdf = await with_options().format("A3").generate_async("<p>x</p>")

        assert pdf == mock_playwright.pdf_bytes
        kwargs = mock_playwright.page.pdf.await_args.kwargs
        assert kwargs["width"] == "11.7in"
        assert kwargs["height"] == "16.5in"

    @pytest.mark.asyncio
    async def test_generate_from_url_async(self, mock_playwright):
        pdf = await with_options().generate_from_url_async("https://example.com/a")

        assert pdf == mock_playwright.pdf_bytes
        mock_playwright.page.goto.assert_awaited_once_with("https://example.com/a")
