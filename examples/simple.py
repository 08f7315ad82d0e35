"""
Simple chromepdf examples.

Usage:
    python examples/simple.py
"""

import sys

from chromepdf import ChromePDFError, PaperFormat, from_html, with_options

HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <style>
        body {
            font-family: Arial, sans-serif;
            margin: 20px;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            min-height: 50vh;
        }
        .container {
            background: rgba(255,255,255,0.1);
            padding: 30px;
            border-radius: 10px;
        }
        h1 { color: #fff; text-align: center; }
    </style>
</head>
<body>
    <div class="container">
        <h1>Hello chromepdf!</h1>
        <p>This is a simple PDF generated from HTML with background colors.</p>
    </div>
</body>
</html>
"""


def main():
    print("=== Simple HTML to PDF ===")

    try:
        pdf_data = from_html(HTML)
        with open("simple.pdf", "wb") as f:
            f.write(pdf_data)
        print(f"Simple PDF generated: {len(pdf_data)} bytes")

        pdf_data = (
            with_options()
            .landscape()
            .margins(0.5, 0.5, 0.5, 0.5)
            .print_background(True)
            .scale(1.0)
            .format(PaperFormat.TABLOID)
            .build()
            .from_html(HTML)
        )
        with open("simple2.pdf", "wb") as f:
            f.write(pdf_data)
        print(f"Landscape Tabloid PDF generated: {len(pdf_data)} bytes")
    except ChromePDFError as e:
        print(f"PDF generation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
