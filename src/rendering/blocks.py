"""Semantic layout blocks.

Blocks are the intermediate representation between the resume and the
target formats. They say what is drawn and in what order; the skin and the
renderer decide how.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Union


class LineRole(str, Enum):
    """What a body line represents within its section."""

    EDUCATION_HEADER = "education_header"
    DEGREE = "degree"
    ENTRY_HEADER = "entry_header"
    ROLE_TITLE = "role_title"
    ROLE_LINE = "role_line"


class SectionKind(str, Enum):
    """Which part of the resume a heading opens."""

    EDUCATION = "education"
    EXPERIENCE = "experience"
    ADDITIONAL = "additional"


@dataclass(frozen=True)
class TextSpan:
    """A run of text with inline emphasis."""

    text: str
    bold: bool = False
    italic: bool = False
    accent: bool = False


@dataclass(frozen=True)
class NameBlock:
    text: str
    kind: Literal["name"] = field(default="name", init=False)


@dataclass(frozen=True)
class ContactBlock:
    text: str
    kind: Literal["contact"] = field(default="contact", init=False)


@dataclass(frozen=True)
class DividerBlock:
    kind: Literal["divider"] = field(default="divider", init=False)


@dataclass(frozen=True)
class HeadingBlock:
    title: str
    section: SectionKind
    kind: Literal["heading"] = field(default="heading", init=False)


@dataclass(frozen=True)
class TwoColumnLineBlock:
    """Left spans, then right-aligned text at the content edge."""

    role: LineRole
    left: tuple[TextSpan, ...]
    right: str
    kind: Literal["two_column"] = field(default="two_column", init=False)

    @property
    def left_text(self) -> str:
        return "".join(span.text for span in self.left)


@dataclass(frozen=True)
class TextLineBlock:
    role: LineRole
    spans: tuple[TextSpan, ...]
    kind: Literal["text"] = field(default="text", init=False)

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


@dataclass(frozen=True)
class BulletListBlock:
    items: tuple[str, ...]
    kind: Literal["bullets"] = field(default="bullets", init=False)


Block = Union[
    NameBlock,
    ContactBlock,
    DividerBlock,
    HeadingBlock,
    TwoColumnLineBlock,
    TextLineBlock,
    BulletListBlock,
]
