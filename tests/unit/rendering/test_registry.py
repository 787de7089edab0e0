"""Unit tests for the template registry."""

import pytest

from src.rendering.exceptions import RenderingError, UnknownTemplateError
from src.rendering.registry import (
    SubscriptionTier,
    TemplateInfo,
    TemplateRegistry,
    default_registry,
)
from src.rendering.skins import CLASSIC, MODERN, TemplateSkin


class TestDefaultRegistry:
    """Tests for the built-in registry."""

    def test_contains_builtins(self):
        registry = default_registry()

        assert len(registry) == 4
        assert [t.slug for t in registry.all()] == [
            "classic",
            "modern",
            "creative",
            "minimal",
        ]

    def test_lookup(self):
        info = default_registry().lookup("modern")

        assert info.name == "Modern"
        assert info.tier == SubscriptionTier.PRO
        assert info.skin is MODERN

    def test_classic_is_free(self):
        assert default_registry().lookup("classic").tier == SubscriptionTier.FREE

    def test_unknown_template_raises(self):
        """Test that unknown identifiers fail without a fallback skin."""
        registry = default_registry()

        with pytest.raises(UnknownTemplateError) as exc_info:
            registry.lookup("fancy")

        assert exc_info.value.slug == "fancy"
        assert isinstance(exc_info.value, RenderingError)
        assert "fancy" in str(exc_info.value)

    def test_contains(self):
        registry = default_registry()
        assert "creative" in registry
        assert "fancy" not in registry

    def test_registries_are_independent(self):
        """Test that each call builds a fresh registry."""
        first = default_registry()
        second = default_registry()
        first.register(
            TemplateInfo(
                slug="extra",
                name="Extra",
                tier=SubscriptionTier.CAREER,
                skin=TemplateSkin(slug="extra", font_family="Arial", print_font_stack="Arial"),
            )
        )

        assert "extra" in first
        assert "extra" not in second


class TestTierAvailability:
    """Tests for tier helper methods."""

    def test_tier_ranks(self):
        assert SubscriptionTier.FREE.rank < SubscriptionTier.PRO.rank
        assert SubscriptionTier.PRO.rank < SubscriptionTier.CAREER.rank

    def test_free_tier_sees_classic_only(self):
        available = default_registry().available_to(SubscriptionTier.FREE)
        assert [t.slug for t in available] == ["classic"]

    def test_paid_tiers_see_everything(self):
        registry = default_registry()
        assert len(registry.available_to(SubscriptionTier.PRO)) == 4
        assert len(registry.available_to(SubscriptionTier.CAREER)) == 4

    def test_is_available_to(self):
        info = default_registry().lookup("minimal")
        assert not info.is_available_to(SubscriptionTier.FREE)
        assert info.is_available_to(SubscriptionTier.CAREER)


class TestRegister:
    """Tests for custom registration."""

    def test_slug_must_match_skin(self):
        registry = TemplateRegistry()
        with pytest.raises(ValueError):
            registry.register(
                TemplateInfo(
                    slug="other", name="Other", tier=SubscriptionTier.FREE, skin=CLASSIC
                )
            )

    def test_skin_lookup(self):
        registry = TemplateRegistry(
            [TemplateInfo(slug="classic", name="C", tier=SubscriptionTier.FREE, skin=CLASSIC)]
        )
        assert registry.skin("classic") is CLASSIC
