"""Canonical resume data model.

Public API:
- ResumeData: The resume snapshot handed to every renderer
- Education, ExperienceSection, ExperienceEntry, Role: Resume parts
- TailoringOverlay, KeywordAnalysis: Ephemeral preview annotation
"""

from src.resume.models import (
    Education,
    ExperienceEntry,
    ExperienceSection,
    KeywordAnalysis,
    ResumeData,
    Role,
    TailoringOverlay,
)

__all__ = [
    "ResumeData",
    "Education",
    "ExperienceSection",
    "ExperienceEntry",
    "Role",
    "KeywordAnalysis",
    "TailoringOverlay",
]
