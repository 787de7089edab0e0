"""Page geometry and unit conversion.

The word-processor target measures in twips (1/20 of a point); the print
target measures in points and inches. Both derive from the same US Letter
page and margin so two-column lines align identically.
"""

from __future__ import annotations

from dataclasses import dataclass

TWIPS_PER_POINT = 20
POINTS_PER_INCH = 72
TWIPS_PER_INCH = TWIPS_PER_POINT * POINTS_PER_INCH  # 1440

LETTER_WIDTH_INCHES = 8.5
LETTER_HEIGHT_INCHES = 11.0
DEFAULT_MARGIN_INCHES = 0.5

# Bullets are always depth 0 with a fixed hanging indent.
BULLET_LEFT_INCHES = 0.25
BULLET_HANGING_INCHES = 0.15
BULLET_LEVEL = 0


def inches_to_twips(inches: float) -> int:
    """Convert inches to whole twips."""
    return round(inches * TWIPS_PER_INCH)


def points_to_twips(points: float) -> int:
    """Convert points to whole twips."""
    return round(points * TWIPS_PER_POINT)


def inches_to_points(inches: float) -> float:
    """Convert inches to points."""
    return inches * POINTS_PER_INCH


def half_points(points: float) -> int:
    """Convert a point size to the half-point unit used for font sizes."""
    return round(points * 2)


@dataclass(frozen=True)
class PageGeometry:
    """US Letter page with a uniform margin."""

    margin_inches: float = DEFAULT_MARGIN_INCHES
    width_inches: float = LETTER_WIDTH_INCHES
    height_inches: float = LETTER_HEIGHT_INCHES

    @property
    def width_twips(self) -> int:
        return inches_to_twips(self.width_inches)

    @property
    def height_twips(self) -> int:
        return inches_to_twips(self.height_inches)

    @property
    def margin_twips(self) -> int:
        return inches_to_twips(self.margin_inches)

    @property
    def content_width_twips(self) -> int:
        return self.width_twips - 2 * self.margin_twips

    @property
    def width_points(self) -> float:
        return inches_to_points(self.width_inches)

    @property
    def height_points(self) -> float:
        return inches_to_points(self.height_inches)

    @property
    def margin_points(self) -> float:
        return inches_to_points(self.margin_inches)

    @property
    def right_tab_twips(self) -> int:
        """Position of the right-aligned tab stop for two-column lines."""
        return self.content_width_twips


@dataclass(frozen=True)
class BulletIndent:
    """Hanging indent shared by every bullet line."""

    left_inches: float = BULLET_LEFT_INCHES
    hanging_inches: float = BULLET_HANGING_INCHES

    @property
    def left_twips(self) -> int:
        return inches_to_twips(self.left_inches)

    @property
    def hanging_twips(self) -> int:
        return inches_to_twips(self.hanging_inches)

    @property
    def left_points(self) -> float:
        return inches_to_points(self.left_inches)

    @property
    def hanging_points(self) -> float:
        return inches_to_points(self.hanging_inches)


BULLET_INDENT = BulletIndent()
