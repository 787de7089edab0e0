"""Template registry.

Maps a template identifier to its skin and the minimum subscription tier
that may use it. Tier gating itself is owned by the caller; the renderers
only need the resolved skin.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from src.rendering.exceptions import UnknownTemplateError
from src.rendering.skins import CLASSIC, CREATIVE, MINIMAL, MODERN, TemplateSkin


class SubscriptionTier(str, Enum):
    """Subscription levels, lowest first."""

    FREE = "FREE"
    PRO = "PRO"
    CAREER = "CAREER"

    @property
    def rank(self) -> int:
        return list(SubscriptionTier).index(self)


class TemplateInfo(BaseModel):
    """Registry entry for one template."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., description="Template identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Short description for pickers")
    tier: SubscriptionTier = Field(..., description="Minimum tier allowed to use it")
    skin: TemplateSkin

    def is_available_to(self, tier: SubscriptionTier) -> bool:
        """Return True if a caller on `tier` meets the minimum tier."""
        return tier.rank >= self.tier.rank


class TemplateRegistry:
    """Lookup table of templates, injected wherever skins are resolved."""

    def __init__(self, templates: Iterable[TemplateInfo] = ()):
        self._templates: dict[str, TemplateInfo] = {}
        for info in templates:
            self.register(info)

    def register(self, info: TemplateInfo) -> None:
        """Add a template; the slug must match its skin's slug."""
        if info.slug != info.skin.slug:
            raise ValueError(
                f"Template slug {info.slug!r} does not match skin {info.skin.slug!r}"
            )
        self._templates[info.slug] = info

    def lookup(self, slug: str) -> TemplateInfo:
        """Resolve a template identifier.

        Raises:
            UnknownTemplateError: If the identifier is not registered.
        """
        try:
            return self._templates[slug]
        except KeyError:
            raise UnknownTemplateError(slug) from None

    def skin(self, slug: str) -> TemplateSkin:
        return self.lookup(slug).skin

    def __contains__(self, slug: object) -> bool:
        return slug in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def all(self) -> list[TemplateInfo]:
        """All templates in registration order."""
        return list(self._templates.values())

    def available_to(self, tier: SubscriptionTier) -> list[TemplateInfo]:
        return [t for t in self._templates.values() if t.is_available_to(tier)]


def default_registry() -> TemplateRegistry:
    """Build a registry holding the built-in templates."""
    return TemplateRegistry(
        [
            TemplateInfo(
                slug="classic",
                name="Classic",
                description="Traditional ATS-friendly format with Times New Roman",
                tier=SubscriptionTier.FREE,
                skin=CLASSIC,
            ),
            TemplateInfo(
                slug="modern",
                name="Modern",
                description="Clean sans-serif design with subtle color accents",
                tier=SubscriptionTier.PRO,
                skin=MODERN,
            ),
            TemplateInfo(
                slug="creative",
                name="Creative",
                description="Serif layout with emerald heading bands",
                tier=SubscriptionTier.PRO,
                skin=CREATIVE,
            ),
            TemplateInfo(
                slug="minimal",
                name="Minimal",
                description="Ultra-clean design with generous whitespace",
                tier=SubscriptionTier.PRO,
                skin=MINIMAL,
            ),
        ]
    )
