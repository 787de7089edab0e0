"""Pytest configuration and shared fixtures."""

import pytest

from src.resume.models import ResumeData, TailoringOverlay
from src.utils.logging import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    """Hand package loggers back to the root logger after each test."""
    yield
    reset_logging()


@pytest.fixture
def full_resume_payload() -> dict:
    """Resume payload as sent by the chat client (camelCase keys)."""
    return {
        "name": "Jane Doe",
        "contactLine1": "jane@example.com | (555) 123-4567 | Boston, MA",
        "contactLine2": "linkedin.com/in/janedoe | github.com/janedoe",
        "education": [
            {
                "institution": "Massachusetts Institute of Technology",
                "location": "Cambridge, MA",
                "degree": "B.S. Computer Science",
                "date": "May 2019",
                "gpa": "3.9",
                "details": ["Dean's List (6 semesters)", "Teaching assistant, 6.006"],
            },
            {
                "institution": "Boston Latin School",
                "location": "Boston, MA",
                "degree": "High School Diploma",
                "date": "June 2015",
            },
        ],
        "experienceSections": [
            {
                "heading": "Experience",
                "entries": [
                    {
                        "company": "Acme Corp",
                        "companyNote": "acquired by Globex",
                        "location": "New York, NY",
                        "roles": [
                            {
                                "title": "Senior Software Engineer",
                                "date": "Jan 2022 - Present",
                                "bullets": [
                                    "Led migration of billing to event-driven services",
                                    "Cut p95 latency by 40% across checkout APIs",
                                ],
                            },
                            {
                                "title": "Software Engineer",
                                "date": "Jul 2019 - Dec 2021",
                                "bullets": ["Built the internal feature-flag service"],
                            },
                        ],
                    },
                    {
                        "company": "Initech",
                        "location": "Austin, TX",
                        "roles": [
                            {
                                "title": "Engineering Intern",
                                "date": "Summer 2018",
                                "bullets": [],
                            }
                        ],
                    },
                ],
            },
            {
                "heading": "Leadership",
                "entries": [
                    {
                        "company": "Code for Boston",
                        "location": "Boston, MA",
                        "roles": [
                            {
                                "title": "Project Lead",
                                "date": "2020 - 2023",
                                "bullets": ["Coordinated 15 volunteers on a housing data tool"],
                            }
                        ],
                    }
                ],
            },
        ],
        "additionalInfo": [
            "Languages: Python, Go, TypeScript",
            "Interests: rock climbing, chess",
        ],
    }


@pytest.fixture
def full_resume(full_resume_payload) -> ResumeData:
    """Resume with every section populated."""
    return ResumeData.from_dict(full_resume_payload)


@pytest.fixture
def two_role_resume() -> ResumeData:
    """One experience section, one entry with two roles, nothing else."""
    return ResumeData.from_dict(
        {
            "name": "Sam Lee",
            "contactLine1": "sam@example.com",
            "education": [],
            "experienceSections": [
                {
                    "heading": "Experience",
                    "entries": [
                        {
                            "company": "Globex",
                            "location": "Springfield",
                            "roles": [
                                {
                                    "title": "Staff Engineer",
                                    "date": "2021 - Present",
                                    "bullets": ["Owned the storage roadmap"],
                                },
                                {
                                    "title": "Senior Engineer",
                                    "date": "2018 - 2021",
                                    "bullets": ["Shipped the replication layer"],
                                },
                            ],
                        }
                    ],
                }
            ],
            "additionalInfo": [],
        }
    )


@pytest.fixture
def minimal_resume() -> ResumeData:
    """Only a name and one contact line; every list empty."""
    return ResumeData(name="Min Imal", contact_line1="min@example.com")


@pytest.fixture
def sample_overlay() -> TailoringOverlay:
    """Tailoring result with found and missing keywords."""
    return TailoringOverlay.from_dict(
        {
            "matchScore": 72,
            "keywords": {
                "found": ["Python", "Kubernetes"],
                "missing": ["Terraform"],
            },
        }
    )
