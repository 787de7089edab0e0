"""Unit tests for template skins."""

import pytest
from pydantic import ValidationError

from src.rendering.skins import (
    BUILTIN_SKINS,
    CLASSIC,
    CREATIVE,
    MINIMAL,
    MODERN,
    DividerStyle,
    HeadingDecoration,
    TemplateSkin,
)


class TestBuiltinSkins:
    """Tests for the four built-in skins."""

    def test_slugs(self):
        assert [s.slug for s in BUILTIN_SKINS] == [
            "classic",
            "modern",
            "creative",
            "minimal",
        ]

    @pytest.mark.parametrize(
        "skin,font,name_size,decoration",
        [
            (CLASSIC, "Times New Roman", 14, HeadingDecoration.RULE),
            (MODERN, "Calibri", 15, HeadingDecoration.RULE),
            (CREATIVE, "Georgia", 16, HeadingDecoration.BAND),
            (MINIMAL, "Helvetica Neue", 15, HeadingDecoration.SPACED),
        ],
    )
    def test_typography(self, skin, font, name_size, decoration):
        assert skin.font_family == font
        assert skin.name_size == name_size
        assert skin.heading_decoration == decoration

    @pytest.mark.parametrize("skin", BUILTIN_SKINS)
    def test_shared_sizes(self, skin):
        """Test that contact, heading and body sizes are common to all skins."""
        assert skin.contact_size == 10
        assert skin.heading_size == 11
        assert skin.body_size == 10

    def test_glyphs_and_margins(self):
        assert CLASSIC.bullet_glyph == "•"
        assert CREATIVE.bullet_glyph == "▸"
        assert MINIMAL.bullet_glyph == "–"
        assert MINIMAL.margin_inches == 0.6
        assert CLASSIC.margin_inches == 0.5

    def test_only_creative_accents_role_titles(self):
        assert CREATIVE.accent_role_titles is True
        assert not any(
            s.accent_role_titles for s in BUILTIN_SKINS if s is not CREATIVE
        )

    def test_only_creative_draws_band_divider(self):
        assert CREATIVE.divider_style is DividerStyle.BAND
        assert all(
            s.divider_style is DividerStyle.RULE for s in BUILTIN_SKINS if s is not CREATIVE
        )

    def test_contact_colours(self):
        assert MINIMAL.contact_color == "666666"
        assert CLASSIC.contact_color == "000000"


class TestTemplateSkin:
    """Tests for TemplateSkin validation and derived values."""

    def test_half_point_sizes(self):
        assert CLASSIC.half_point_sizes() == {
            "name": 28,
            "contact": 20,
            "heading": 22,
            "body": 20,
        }

    def test_colour_normalized(self):
        """Test that '#abc123' style colours are stored as RRGGBB."""
        skin = TemplateSkin(
            slug="test",
            font_family="Arial",
            print_font_stack="Arial, sans-serif",
            accent_color="#2563eb",
        )
        assert skin.accent_color == "2563EB"
        assert skin.css_color("accent_color") == "#2563EB"

    @pytest.mark.parametrize("colour", ["blue", "#12345", "GGGGGG"])
    def test_invalid_colour_rejected(self, colour):
        with pytest.raises(ValidationError):
            TemplateSkin(
                slug="test",
                font_family="Arial",
                print_font_stack="Arial",
                rule_color=colour,
            )

    def test_bullet_glyph_single_character(self):
        with pytest.raises(ValidationError):
            TemplateSkin(
                slug="test", font_family="Arial", print_font_stack="Arial", bullet_glyph="->"
            )

    def test_geometry_uses_margin(self):
        assert MINIMAL.geometry.margin_twips == 864
        assert CLASSIC.geometry.margin_twips == 720

    def test_is_frozen(self):
        with pytest.raises(ValidationError):
            CLASSIC.name_size = 20
