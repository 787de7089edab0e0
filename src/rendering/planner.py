"""Structural layout planner.

Walks a ResumeData snapshot in a fixed order and emits the block list every
renderer lowers: name, contact lines and divider, then Education, each
experience section in data order, then Additional. Empty sections are
suppressed entirely. Within an entry only the first role shares a line with
the company header; later roles get a title/date line of their own.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any

from src.rendering.blocks import (
    Block,
    BulletListBlock,
    ContactBlock,
    DividerBlock,
    HeadingBlock,
    LineRole,
    NameBlock,
    SectionKind,
    TextLineBlock,
    TextSpan,
    TwoColumnLineBlock,
)
from src.rendering.skins import TemplateSkin
from src.resume.models import Education, ExperienceEntry, ExperienceSection, ResumeData

logger = logging.getLogger(__name__)

EDUCATION_HEADING = "Education"
ADDITIONAL_HEADING = "Additional"


@dataclass(frozen=True)
class LayoutPlan:
    """Ordered blocks for one resume, paired with the skin to draw them."""

    blocks: tuple[Block, ...]
    skin: TemplateSkin

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)

    def headings(self) -> list[HeadingBlock]:
        return [b for b in self.blocks if isinstance(b, HeadingBlock)]

    def section_titles(self) -> list[str]:
        return [h.title for h in self.headings()]

    def count(self, kind: str) -> int:
        return sum(1 for b in self.blocks if b.kind == kind)

    def count_roles(self) -> Counter:
        """Count two-column and text lines by their LineRole."""
        return Counter(
            b.role
            for b in self.blocks
            if isinstance(b, (TwoColumnLineBlock, TextLineBlock))
        )

    def signature(self) -> tuple[Any, ...]:
        """Skin-independent description of the structure.

        Two plans with equal signatures have the same blocks in the same
        order with the same text.
        """
        items: list[Any] = []
        for block in self.blocks:
            if isinstance(block, (NameBlock, ContactBlock)):
                items.append((block.kind, block.text))
            elif isinstance(block, HeadingBlock):
                items.append((block.kind, block.section.value, block.title))
            elif isinstance(block, TwoColumnLineBlock):
                items.append((block.kind, block.role.value, block.left_text, block.right))
            elif isinstance(block, TextLineBlock):
                items.append((block.kind, block.role.value, block.text))
            elif isinstance(block, BulletListBlock):
                items.append((block.kind, block.items))
            else:
                items.append((block.kind,))
        return tuple(items)


class LayoutPlanner:
    """Builds a LayoutPlan from a resume and a skin."""

    def plan(self, resume: ResumeData, skin: TemplateSkin) -> LayoutPlan:
        """Plan the blocks for a resume.

        Args:
            resume: Validated resume snapshot.
            skin: Skin the renderers will apply.

        Returns:
            LayoutPlan with blocks in display order.
        """
        blocks: list[Block] = []

        self._add_header(blocks, resume)

        if resume.education:
            blocks.append(HeadingBlock(EDUCATION_HEADING, SectionKind.EDUCATION))
            for edu in resume.education:
                self._add_education(blocks, edu)

        for section in resume.experience_sections:
            self._add_experience_section(blocks, section)

        if resume.additional_info:
            blocks.append(HeadingBlock(ADDITIONAL_HEADING, SectionKind.ADDITIONAL))
            blocks.append(BulletListBlock(tuple(resume.additional_info)))

        plan = LayoutPlan(blocks=tuple(blocks), skin=skin)
        logger.debug(
            f"Planned {len(plan)} blocks for template {skin.slug}: "
            f"{plan.section_titles()}"
        )
        return plan

    def _add_header(self, blocks: list[Block], resume: ResumeData) -> None:
        blocks.append(NameBlock(resume.name))
        blocks.append(ContactBlock(resume.contact_line1))
        if resume.contact_line2 and resume.contact_line2.strip():
            blocks.append(ContactBlock(resume.contact_line2))
        blocks.append(DividerBlock())

    def _add_education(self, blocks: list[Block], edu: Education) -> None:
        blocks.append(
            TwoColumnLineBlock(
                role=LineRole.EDUCATION_HEADER,
                left=(
                    TextSpan(edu.institution, bold=True),
                    TextSpan(f", {edu.location}"),
                ),
                right=edu.date,
            )
        )
        blocks.append(
            TextLineBlock(
                role=LineRole.DEGREE,
                spans=(TextSpan(edu.degree_line, italic=True),),
            )
        )
        if edu.details:
            blocks.append(BulletListBlock(tuple(edu.details)))

    def _add_experience_section(
        self, blocks: list[Block], section: ExperienceSection
    ) -> None:
        if not section.entries:
            return

        blocks.append(HeadingBlock(section.heading, SectionKind.EXPERIENCE))
        for entry in section.entries:
            self._add_entry(blocks, entry)

    def _add_entry(self, blocks: list[Block], entry: ExperienceEntry) -> None:
        for index, role in enumerate(entry.roles):
            if index == 0:
                company = [TextSpan(entry.company, bold=True)]
                if entry.company_note:
                    company.append(TextSpan(f" ({entry.company_note})"))
                company.append(TextSpan(f", {entry.location}"))

                blocks.append(
                    TwoColumnLineBlock(
                        role=LineRole.ENTRY_HEADER,
                        left=tuple(company),
                        right=role.date,
                    )
                )
                blocks.append(
                    TextLineBlock(
                        role=LineRole.ROLE_TITLE,
                        spans=(TextSpan(role.title, italic=True, accent=True),),
                    )
                )
            else:
                blocks.append(
                    TwoColumnLineBlock(
                        role=LineRole.ROLE_LINE,
                        left=(TextSpan(role.title, italic=True),),
                        right=role.date,
                    )
                )

            if role.bullets:
                blocks.append(BulletListBlock(tuple(role.bullets)))
