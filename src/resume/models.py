"""Data models for the canonical resume.

Contains Pydantic models for:
- ResumeData: The format-agnostic resume every renderer consumes
- Education, ExperienceSection, ExperienceEntry, Role: Its parts
- TailoringOverlay: Ephemeral match score and keyword split for the preview

The wire format is camelCase JSON (``contactLine1``, ``experienceSections``);
snake_case attribute names are accepted on input as well.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _none_to_empty(value: Any) -> Any:
    return [] if value is None else value


class ResumeModel(BaseModel):
    """Base for immutable resume snapshots."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a camelCase dictionary."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Role(ResumeModel):
    """A single position held at a company."""

    title: str = Field(..., description="Role title")
    date: str = Field(..., description="Date range as displayed")
    bullets: list[str] = Field(default_factory=list, description="Bullets in display order")

    @field_validator("bullets", mode="before")
    @classmethod
    def coerce_bullets(cls, v: Any) -> Any:
        """Treat a null bullet list as empty."""
        return _none_to_empty(v)


class ExperienceEntry(ResumeModel):
    """One employer (or lab, or organisation) with its roles."""

    company: str = Field(..., description="Company name")
    company_note: str | None = Field(
        default=None, description="Parenthetical qualifier, e.g. 'acquired by X'"
    )
    location: str = Field(..., description="Company location")
    roles: list[Role] = Field(default_factory=list, description="Roles, most recent first")

    @field_validator("roles", mode="before")
    @classmethod
    def coerce_roles(cls, v: Any) -> Any:
        """Treat a null role list as empty."""
        return _none_to_empty(v)


class ExperienceSection(ResumeModel):
    """A named group of entries such as 'Experience' or 'Research Experience'."""

    heading: str = Field(..., description="Section heading")
    entries: list[ExperienceEntry] = Field(
        default_factory=list, description="Entries in display order"
    )

    @field_validator("entries", mode="before")
    @classmethod
    def coerce_entries(cls, v: Any) -> Any:
        """Treat a null entry list as empty."""
        return _none_to_empty(v)


class Education(ResumeModel):
    """An education entry."""

    institution: str = Field(..., description="School or university")
    location: str = Field(..., description="Institution location")
    degree: str = Field(..., description="Degree and field")
    date: str = Field(..., description="Graduation or attendance date")
    gpa: str | None = Field(default=None, description="GPA as displayed")
    details: list[str] = Field(default_factory=list, description="Detail bullets")

    @field_validator("details", mode="before")
    @classmethod
    def coerce_details(cls, v: Any) -> Any:
        """Treat a null detail list as empty."""
        return _none_to_empty(v)

    @property
    def degree_line(self) -> str:
        """Degree text with the GPA suffix when a GPA is present."""
        if self.gpa and self.gpa.strip():
            return f"{self.degree}; GPA: {self.gpa}"
        return self.degree


class ResumeData(ResumeModel):
    """Complete resume ready for rendering."""

    name: str = Field(..., description="Candidate name")
    contact_line1: str = Field(..., description="Primary contact line")
    contact_line2: str | None = Field(default=None, description="Secondary contact line")

    education: list[Education] = Field(default_factory=list)
    experience_sections: list[ExperienceSection] = Field(default_factory=list)
    additional_info: list[str] = Field(
        default_factory=list, description="Free-text bullets for the Additional section"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Require a non-empty trimmed name."""
        value = v.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value

    @field_validator("education", "experience_sections", "additional_info", mode="before")
    @classmethod
    def coerce_lists(cls, v: Any) -> Any:
        """Treat null lists as empty."""
        return _none_to_empty(v)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResumeData:
        """Deserialize from dictionary."""
        return cls.model_validate(data)


class KeywordAnalysis(ResumeModel):
    """Job-description keywords split by presence in the resume."""

    found: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)

    @field_validator("found", "missing", mode="before")
    @classmethod
    def coerce_lists(cls, v: Any) -> Any:
        """Treat null lists as empty."""
        return _none_to_empty(v)


class TailoringOverlay(ResumeModel):
    """Ephemeral tailoring annotation shown on the preview only.

    Produced by an external job-description matching pass. It is never
    persisted with or merged into ResumeData.
    """

    match_score: int = Field(..., ge=0, le=100, description="Match score (0-100)")
    keywords: KeywordAnalysis | None = Field(default=None)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TailoringOverlay:
        """Deserialize from dictionary."""
        return cls.model_validate(data)
