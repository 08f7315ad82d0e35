"""
Helper functions for the PDF service.

Build the HTML document that gets rendered and the filename that goes
into the Content-Disposition header.
"""

import re
from typing import Optional
from urllib.parse import urlparse


def sanitize_for_path(text: str) -> str:
    """
    Sanitize text for use in filenames.

    Replaces everything except ASCII word chars, spaces and hyphens
    with underscores, then replaces spaces with underscores. The result
    is safe for a latin-1 encoded Content-Disposition header.

    Example:
        >>> sanitize_for_path("Quarterly Report (Q3)")
        "Quarterly_Report__Q3_"
    """
    cleaned = re.sub(r"[^\w\s-]", "_", text, flags=re.ASCII)
    return cleaned.replace(" ", "_")


def build_html_document(html: str, css: Optional[str] = None) -> str:
    """
    Combine HTML and optional CSS into one document.

    Without CSS the HTML is passed through unchanged, so callers sending
    a complete document keep full control of <head>.

    Args:
        html: HTML body or complete document
        css: Additional CSS styles

    Returns:
        HTML string ready for rendering
    """
    if not css:
        return html

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <style>{css}</style>
</head>
<body>
    {html}
</body>
</html>
"""


def pdf_filename(title: Optional[str] = None, url: Optional[str] = None) -> str:
    """
    Pick a download filename for a rendered PDF.

    Preference: explicit title, then the URL's host and path, then "document".

    Example:
        >>> pdf_filename(url="https://example.com/docs/intro")
        "example_com_docs_intro.pdf"
    """
    if title:
        stem = sanitize_for_path(title.strip())
    elif url:
        parsed = urlparse(url)
        parts = [parsed.netloc] + [p for p in parsed.path.split("/") if p]
        stem = sanitize_for_path("_".join(parts))[:80]
    else:
        stem = ""

    return f"{stem or 'document'}.pdf"
