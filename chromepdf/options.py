"""
Rendering options for PDF generation.

PDFOptions is the flat record handed to the browser's print-to-PDF call.
Values are validated on construction and on every assignment, so the
builder fails at the call that sets a bad value rather than inside Chromium.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class PaperFormat(str, Enum):
    """Named paper formats supported by the generator."""
    A4 = "A4"
    A3 = "A3"
    LETTER = "Letter"
    LEGAL = "Legal"
    TABLOID = "Tabloid"


# Width x height in inches
PAPER_SIZES: Dict[PaperFormat, Tuple[float, float]] = {
    PaperFormat.A4: (8.27, 11.7),
    PaperFormat.A3: (11.7, 16.5),
    PaperFormat.LETTER: (8.5, 11.0),
    PaperFormat.LEGAL: (8.5, 14.0),
    PaperFormat.TABLOID: (11.0, 17.0),
}

# Settle time used when no wait condition is configured
DEFAULT_SETTLE_SECONDS = 0.5


def _inches(value: float) -> str:
    return f"{value}in"


class PDFOptions(BaseModel):
    """
    Configuration options for PDF generation.

    Sizes and margins are in inches, durations in seconds. The wait and
    timeout fields control the browser session and are not part of the
    serialized print settings.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    # Page settings
    format: Optional[PaperFormat] = Field(
        default=PaperFormat.A4,
        description="Named paper format; None to use width/height"
    )
    width: float = Field(default=0.0, ge=0, description="Paper width in inches")
    height: float = Field(default=0.0, ge=0, description="Paper height in inches")

    # Margins
    margin_top: float = Field(default=0.4, ge=0)
    margin_bottom: float = Field(default=0.4, ge=0)
    margin_left: float = Field(default=0.4, ge=0)
    margin_right: float = Field(default=0.4, ge=0)

    # Layout
    landscape: bool = False
    print_background: bool = True
    scale: float = Field(default=1.0, ge=0.1, le=2.0, description="Rendering scale (0.1 to 2)")

    # Header and footer
    display_header_footer: bool = False
    header_template: str = ""
    footer_template: str = ""

    # Wait conditions
    wait_for_selector: str = Field(default="", exclude=True)
    wait_time: float = Field(default=2.0, ge=0, exclude=True)

    timeout: float = Field(default=30.0, gt=0, exclude=True)

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v: Any) -> Any:
        """Treat an empty format as unset and match names case-insensitively."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            for fmt in PaperFormat:
                if fmt.value.lower() == v.strip().lower():
                    return fmt
        return v

    def paper_size(self) -> Optional[Tuple[float, float]]:
        """
        Resolve the paper size in inches.

        A named format wins over custom dimensions. Custom dimensions only
        apply when both are positive. None means the browser default.
        """
        if self.format is not None:
            return PAPER_SIZES[self.format]
        if self.width > 0 and self.height > 0:
            return (self.width, self.height)
        return None

    def to_print_params(self) -> Dict[str, Any]:
        """
        Map the options to keyword arguments for Playwright's page.pdf().

        Returns:
            Dict of print-to-PDF parameters
        """
        params: Dict[str, Any] = {
            "print_background": self.print_background,
            "landscape": self.landscape,
            "display_header_footer": self.display_header_footer,
            "scale": self.scale,
            "margin": {
                "top": _inches(self.margin_top),
                "bottom": _inches(self.margin_bottom),
                "left": _inches(self.margin_left),
                "right": _inches(self.margin_right),
            },
        }

        size = self.paper_size()
        if size is not None:
            params["width"] = _inches(size[0])
            params["height"] = _inches(size[1])

        if self.header_template:
            params["header_template"] = self.header_template
        if self.footer_template:
            params["footer_template"] = self.footer_template

        return params


def default_options() -> PDFOptions:
    """Return sensible defaults: A4, 0.4in margins, backgrounds on, 2s settle, 30s timeout."""
    return PDFOptions()
