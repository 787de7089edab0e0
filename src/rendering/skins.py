"""Template skins.

A skin is a pure parameter set: fonts, sizes, colors, bullet glyph,
heading decoration and margin. Skins never change which blocks are emitted
or their order; only how each renderer draws them.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.rendering.geometry import PageGeometry, half_points


class HeadingDecoration(str, Enum):
    """How section headings are set apart from body text."""

    RULE = "rule"  # rule line beneath the heading
    BAND = "band"  # solid colour band behind the heading text
    SPACED = "spaced"  # letter-spaced uppercase, no rule


class DividerStyle(str, Enum):
    """How the line after the contact block is drawn."""

    RULE = "rule"  # thin bottom border in the rule colour
    BAND = "band"  # solid accent stripe


class TemplateSkin(BaseModel):
    """Visual parameters for one template identity."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., description="Template identifier")
    font_family: str = Field(..., description="Base typeface for the whole document")
    print_font_stack: str = Field(..., description="CSS font-family list for print and preview")

    name_size: Annotated[float, Field(gt=0)] = Field(default=14, description="Name size (pt)")
    contact_size: Annotated[float, Field(gt=0)] = Field(default=10, description="Contact size (pt)")
    heading_size: Annotated[float, Field(gt=0)] = Field(default=11, description="Heading size (pt)")
    body_size: Annotated[float, Field(gt=0)] = Field(default=10, description="Body size (pt)")

    accent_color: str = Field(default="000000", description="Accent colour (RRGGBB)")
    heading_color: str = Field(default="000000", description="Heading text colour (RRGGBB)")
    contact_color: str = Field(default="000000", description="Contact line colour (RRGGBB)")
    rule_color: str = Field(default="000000", description="Divider and rule colour (RRGGBB)")
    bullet_glyph: str = Field(default="•", min_length=1, max_length=1)
    heading_decoration: HeadingDecoration = Field(default=HeadingDecoration.RULE)
    divider_style: DividerStyle = Field(default=DividerStyle.RULE)
    heading_letter_spacing: float = Field(
        default=0, ge=0, description="Extra spacing between heading letters (pt)"
    )
    accent_role_titles: bool = Field(
        default=False, description="Draw first-role titles in the accent colour"
    )
    margin_inches: Annotated[float, Field(gt=0, lt=2)] = Field(default=0.5)

    @field_validator(
        "accent_color", "heading_color", "contact_color", "rule_color", mode="before"
    )
    @classmethod
    def normalize_color(cls, v: str) -> str:
        """Accept '#rrggbb' or 'rrggbb' and store uppercase RRGGBB."""
        value = str(v).strip().lstrip("#").upper()
        if len(value) != 6 or any(c not in "0123456789ABCDEF" for c in value):
            raise ValueError(f"Invalid colour: {v}")
        return value

    @property
    def geometry(self) -> PageGeometry:
        return PageGeometry(margin_inches=self.margin_inches)

    def half_point_sizes(self) -> dict[str, int]:
        """Font sizes in half-points for the word-processor target."""
        return {
            "name": half_points(self.name_size),
            "contact": half_points(self.contact_size),
            "heading": half_points(self.heading_size),
            "body": half_points(self.body_size),
        }

    def css_color(self, attr: str) -> str:
        """Return one of the colour parameters as a CSS hex string."""
        return f"#{getattr(self, attr)}"


CLASSIC = TemplateSkin(
    slug="classic",
    font_family="Times New Roman",
    print_font_stack="'Times New Roman', Times, serif",
    name_size=14,
    heading_decoration=HeadingDecoration.RULE,
)

MODERN = TemplateSkin(
    slug="modern",
    font_family="Calibri",
    print_font_stack="Calibri, Carlito, 'Helvetica Neue', Arial, sans-serif",
    name_size=15,
    accent_color="2563EB",
    heading_color="2563EB",
    rule_color="2563EB",
    heading_decoration=HeadingDecoration.RULE,
)

CREATIVE = TemplateSkin(
    slug="creative",
    font_family="Georgia",
    print_font_stack="Georgia, 'DejaVu Serif', serif",
    name_size=16,
    accent_color="059669",
    heading_color="FFFFFF",
    bullet_glyph="▸",
    heading_decoration=HeadingDecoration.BAND,
    divider_style=DividerStyle.BAND,
    accent_role_titles=True,
)

MINIMAL = TemplateSkin(
    slug="minimal",
    font_family="Helvetica Neue",
    print_font_stack="'Helvetica Neue', Arial, sans-serif",
    name_size=15,
    accent_color="555555",
    heading_color="555555",
    contact_color="666666",
    bullet_glyph="–",
    heading_decoration=HeadingDecoration.SPACED,
    heading_letter_spacing=2,
    margin_inches=0.6,
)

BUILTIN_SKINS: tuple[TemplateSkin, ...] = (CLASSIC, MODERN, CREATIVE, MINIMAL)
