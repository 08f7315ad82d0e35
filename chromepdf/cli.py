"""
Command-line interface for chromepdf.

Usage:
    chromepdf html page.html -o page.pdf
    chromepdf html - -o page.pdf --landscape --format Letter < page.html
    chromepdf url https://example.com -o example.pdf --wait-for "#content"
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .builder import OptionsBuilder, with_options
from .config import get_settings
from .errors import ChromePDFError
from .logger import setup_logging
from .options import PaperFormat


def _add_option_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output", "-o",
        type=str,
        required=True,
        help="Path for the generated PDF"
    )
    parser.add_argument(
        "--format", "-f",
        type=str,
        default=None,
        choices=[fmt.value for fmt in PaperFormat],
        help="Paper format (default: A4)"
    )
    parser.add_argument(
        "--size",
        type=float,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=None,
        help="Custom paper size in inches (overrides --format)"
    )
    parser.add_argument(
        "--margins",
        type=float,
        nargs=4,
        metavar=("TOP", "BOTTOM", "LEFT", "RIGHT"),
        default=None,
        help="Margins in inches (default: 0.4 each)"
    )
    parser.add_argument("--landscape", action="store_true", help="Landscape orientation")
    parser.add_argument("--scale", type=float, default=None, help="Rendering scale (0.1 to 2.0)")
    parser.add_argument(
        "--no-background",
        action="store_true",
        help="Do not print background colors and images"
    )
    parser.add_argument("--header", type=str, default=None, help="Header HTML template")
    parser.add_argument("--footer", type=str, default=None, help="Footer HTML template")
    parser.add_argument("--wait-for", type=str, default=None, help="CSS selector to wait for")
    parser.add_argument("--wait-time", type=float, default=None, help="Extra wait in seconds (default: 2)")
    parser.add_argument("--timeout", type=float, default=None, help="Session timeout in seconds (default: 30)")
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING or ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chromepdf",
        description="Convert HTML or a URL to PDF using headless Chromium",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Convert a local HTML file
    chromepdf html report.html -o report.pdf

    # Read HTML from stdin, landscape Letter with 1in margins
    cat report.html | chromepdf html - -o report.pdf --landscape -f Letter --margins 1 1 1 1

    # Render a page once its content has loaded
    chromepdf url https://example.com -o example.pdf --wait-for main --wait-time 0
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    html_parser = subparsers.add_parser("html", help="Convert an HTML file (or - for stdin)")
    html_parser.add_argument("input", type=str, help="Path to the HTML file, or - for stdin")
    _add_option_flags(html_parser)

    url_parser = subparsers.add_parser("url", help="Convert a web page")
    url_parser.add_argument("url", type=str, help="URL to render")
    _add_option_flags(url_parser)

    return parser


def builder_from_args(args: argparse.Namespace) -> OptionsBuilder:
    """Translate parsed flags into a configured builder."""
    builder = with_options()

    if args.format:
        builder.format(args.format)
    if args.size:
        builder.size(*args.size)
    if args.margins:
        builder.margins(*args.margins)
    if args.landscape:
        builder.landscape()
    if args.scale is not None:
        builder.scale(args.scale)
    if args.no_background:
        builder.print_background(False)
    if args.header is not None or args.footer is not None:
        builder.header_footer(args.header or "", args.footer or "")
    if args.wait_for:
        builder.wait_for(args.wait_for)
    if args.wait_time is not None:
        builder.wait_time(args.wait_time)
    if args.timeout is not None:
        builder.timeout(args.timeout)

    return builder


def _read_html(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(args.log_level or settings.log_level, settings.log_format)

    try:
        builder = builder_from_args(args)
        if args.command == "html":
            pdf_bytes = builder.generate(_read_html(args.input))
        else:
            pdf_bytes = builder.generate_from_url(args.url)

        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(pdf_bytes)
    except FileNotFoundError as e:
        print(f"File not found: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Input is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return 1
    except ChromePDFError as e:
        print(f"Conversion error: {e}", file=sys.stderr)
        return 1

    print(f"PDF generated: {output_path} ({len(pdf_bytes)} bytes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
