"""Word-processor renderer using python-docx.

Lowers a LayoutPlan into a DOCX package. Two-column lines use a single
right-aligned tab stop at the content edge instead of a table, and every
bullet references one numbering definition carrying the skin's glyph.
"""

from __future__ import annotations

import asyncio
import io
import logging
import re
from xml.sax.saxutils import quoteattr

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_TAB_ALIGNMENT
from docx.oxml import OxmlElement, parse_xml
from docx.oxml.ns import nsdecls, qn
from docx.shared import Pt, RGBColor, Twips

from src.rendering.blocks import (
    Block,
    BulletListBlock,
    ContactBlock,
    DividerBlock,
    HeadingBlock,
    LineRole,
    NameBlock,
    TextLineBlock,
    TextSpan,
    TwoColumnLineBlock,
)
from src.rendering.exceptions import DocumentEncodingError
from src.rendering.geometry import BULLET_INDENT, BULLET_LEVEL, points_to_twips
from src.rendering.planner import LayoutPlan
from src.rendering.skins import DividerStyle, HeadingDecoration, TemplateSkin

logger = logging.getLogger(__name__)

DOCX_CONTENT_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)

# Paragraph spacing in twips, per heading decoration: (before, after).
_HEADING_SPACING = {
    HeadingDecoration.RULE: (160, 40),
    HeadingDecoration.BAND: (200, 60),
    HeadingDecoration.SPACED: (240, 60),
}
_LINE_SPACING_BEFORE = {
    LineRole.EDUCATION_HEADER: 40,
    LineRole.ENTRY_HEADER: 40,
    LineRole.ROLE_LINE: 20,
}
_RULE_SIZE = "4"  # eighths of a point
_BAND_MARK_SIZE = "4"  # half-points; sets the height of the divider stripe
_WHITE = "FFFFFF"

# Child order of w:pPr and w:rPr required by the WordprocessingML schema.
_PPR_SEQUENCE = (
    "w:pStyle", "w:keepNext", "w:keepLines", "w:pageBreakBefore", "w:framePr",
    "w:widowControl", "w:numPr", "w:suppressLineNumbers", "w:pBdr", "w:shd",
    "w:tabs", "w:suppressAutoHyphens", "w:kinsoku", "w:wordWrap",
    "w:overflowPunct", "w:topLinePunct", "w:autoSpaceDE", "w:autoSpaceDN",
    "w:bidi", "w:adjustRightInd", "w:snapToGrid", "w:spacing", "w:ind",
    "w:contextualSpacing", "w:mirrorIndents", "w:suppressOverlap", "w:jc",
    "w:textDirection", "w:textAlignment", "w:textboxTightWrap",
    "w:outlineLvl", "w:divId", "w:cnfStyle", "w:rPr", "w:sectPr",
    "w:pPrChange",
)
_RPR_SEQUENCE = (
    "w:rStyle", "w:rFonts", "w:b", "w:bCs", "w:i", "w:iCs", "w:caps",
    "w:smallCaps", "w:strike", "w:dstrike", "w:outline", "w:shadow",
    "w:emboss", "w:imprint", "w:noProof", "w:snapToGrid", "w:vanish",
    "w:webHidden", "w:color", "w:spacing", "w:w", "w:kern", "w:position",
    "w:sz", "w:szCs", "w:highlight", "w:u", "w:effect", "w:bdr", "w:shd",
    "w:fitText", "w:vertAlign", "w:rtl", "w:cs", "w:em", "w:lang",
    "w:eastAsianLayout", "w:specVanish", "w:oMath",
)

# Characters that cannot appear in XML 1.0 text, lone surrogates included.
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _successors(sequence: tuple[str, ...], tag: str) -> tuple[str, ...]:
    return sequence[sequence.index(tag) + 1 :]


def _clean(text: str) -> str:
    return _INVALID_XML_CHARS.sub("", text)


class DocxRenderer:
    """Renders layout plans to DOCX bytes."""

    def render(self, plan: LayoutPlan) -> bytes:
        """Render a plan to a complete DOCX package.

        Args:
            plan: Planned blocks and skin.

        Returns:
            DOCX bytes (a ZIP container).

        Raises:
            DocumentEncodingError: If building or packaging the document fails.
        """
        try:
            document = self._build_document(plan)
            buffer = io.BytesIO()
            document.save(buffer)
        except Exception as e:
            raise DocumentEncodingError(
                f"Failed to encode DOCX for template {plan.skin.slug}: {e}",
                original_error=e,
            ) from e

        payload = buffer.getvalue()
        logger.debug(f"Encoded DOCX ({len(payload)} bytes, {len(plan)} blocks)")
        return payload

    async def render_async(self, plan: LayoutPlan) -> bytes:
        """Render a plan off the event loop as one unit of work."""
        return await asyncio.to_thread(self.render, plan)

    def _build_document(self, plan: LayoutPlan):
        skin = plan.skin
        document = Document()
        self._setup_page(document, skin)
        self._setup_default_styles(document, skin)
        num_id = self._add_bullet_numbering(document, skin)

        name = _clean(
            next((b.text for b in plan.blocks if isinstance(b, NameBlock)), "")
        )
        document.core_properties.author = name
        document.core_properties.title = f"{name} - Resume" if name else "Resume"

        writer = _BlockWriter(document, skin, num_id)
        for block in plan.blocks:
            writer.write(block)
        return document

    def _setup_page(self, document, skin: TemplateSkin) -> None:
        geometry = skin.geometry
        section = document.sections[0]
        section.page_width = Twips(geometry.width_twips)
        section.page_height = Twips(geometry.height_twips)
        section.top_margin = Twips(geometry.margin_twips)
        section.bottom_margin = Twips(geometry.margin_twips)
        section.left_margin = Twips(geometry.margin_twips)
        section.right_margin = Twips(geometry.margin_twips)
        section.header_distance = Twips(0)
        section.footer_distance = Twips(0)

    def _setup_default_styles(self, document, skin: TemplateSkin) -> None:
        normal = document.styles["Normal"]
        normal.font.name = skin.font_family
        normal.font.size = Pt(skin.body_size)
        normal.paragraph_format.space_before = Pt(0)
        normal.paragraph_format.space_after = Pt(0)

    def _add_bullet_numbering(self, document, skin: TemplateSkin) -> int:
        """Add the document's single bullet definition and return its numId."""
        numbering = document.part.numbering_part.element

        abstract_ids = [
            int(an.get(qn("w:abstractNumId"), "-1"))
            for an in numbering.findall(qn("w:abstractNum"))
        ]
        abstract_id = max(abstract_ids, default=-1) + 1

        font = quoteattr(skin.font_family)
        glyph = quoteattr(skin.bullet_glyph)
        abstract = parse_xml(
            f'<w:abstractNum {nsdecls("w")} w:abstractNumId="{abstract_id}">'
            f'<w:multiLevelType w:val="singleLevel"/>'
            f'<w:lvl w:ilvl="{BULLET_LEVEL}">'
            f'<w:start w:val="1"/>'
            f'<w:numFmt w:val="bullet"/>'
            f"<w:lvlText w:val={glyph}/>"
            f'<w:lvlJc w:val="left"/>'
            f"<w:pPr>"
            f'<w:ind w:left="{BULLET_INDENT.left_twips}" '
            f'w:hanging="{BULLET_INDENT.hanging_twips}"/>'
            f"</w:pPr>"
            f"<w:rPr>"
            f"<w:rFonts w:ascii={font} w:hAnsi={font} w:cs={font}/>"
            f'<w:color w:val="{skin.accent_color}"/>'
            f'<w:sz w:val="{skin.half_point_sizes()["body"]}"/>'
            f"</w:rPr>"
            f"</w:lvl>"
            f"</w:abstractNum>"
        )

        # abstractNum definitions must precede every w:num in numbering.xml.
        first_num = numbering.find(qn("w:num"))
        if first_num is not None:
            first_num.addprevious(abstract)
        else:
            numbering.append(abstract)

        num = numbering.add_num(abstract_id)
        return num.numId


class _BlockWriter:
    """Appends paragraphs for blocks to a document."""

    def __init__(self, document, skin: TemplateSkin, num_id: int):
        self.document = document
        self.skin = skin
        self.num_id = num_id
        self.sizes = {k: v / 2 for k, v in skin.half_point_sizes().items()}

    def write(self, block: Block) -> None:
        if isinstance(block, NameBlock):
            paragraph = self._paragraph(align=WD_ALIGN_PARAGRAPH.CENTER)
            self._run(paragraph, block.text, size=self.sizes["name"], bold=True)
        elif isinstance(block, ContactBlock):
            paragraph = self._paragraph(align=WD_ALIGN_PARAGRAPH.CENTER)
            self._run(
                paragraph,
                block.text,
                size=self.sizes["contact"],
                color=self.skin.contact_color,
            )
        elif isinstance(block, DividerBlock):
            self._divider()
        elif isinstance(block, HeadingBlock):
            self._heading(block)
        elif isinstance(block, TwoColumnLineBlock):
            self._two_column(block)
        elif isinstance(block, TextLineBlock):
            paragraph = self._paragraph()
            for span in block.spans:
                self._span(paragraph, span)
        elif isinstance(block, BulletListBlock):
            for item in block.items:
                self._bullet(item)
        else:
            raise TypeError(f"Unsupported block: {block!r}")

    def _paragraph(self, align=None):
        paragraph = self.document.add_paragraph()
        if align is not None:
            paragraph.alignment = align
        return paragraph

    def _spacing(self, paragraph, before: int = 0, after: int = 0) -> None:
        paragraph.paragraph_format.space_before = Twips(before)
        paragraph.paragraph_format.space_after = Twips(after)

    def _run(
        self,
        paragraph,
        text: str,
        size: float | None = None,
        bold: bool = False,
        italic: bool = False,
        color: str | None = None,
        all_caps: bool = False,
    ):
        run = paragraph.add_run(_clean(text))
        run.font.name = self.skin.font_family
        run.font.size = Pt(size if size is not None else self.sizes["body"])
        if bold:
            run.font.bold = True
        if italic:
            run.font.italic = True
        if all_caps:
            run.font.all_caps = True
        if color is not None:
            run.font.color.rgb = RGBColor.from_string(color)
        return run

    def _span(self, paragraph, span: TextSpan):
        color = None
        if span.accent and self.skin.accent_role_titles:
            color = self.skin.accent_color
        return self._run(
            paragraph, span.text, bold=span.bold, italic=span.italic, color=color
        )

    def _divider(self) -> None:
        paragraph = self._paragraph()
        if self.skin.divider_style is DividerStyle.BAND:
            self._shading(paragraph, self.skin.accent_color)
            self._mark_size(paragraph, _BAND_MARK_SIZE)
            self._spacing(paragraph, before=60)
        else:
            self._bottom_border(paragraph, self.skin.rule_color)
            self._spacing(paragraph, after=40)

    def _heading(self, block: HeadingBlock) -> None:
        decoration = self.skin.heading_decoration
        paragraph = self._paragraph()
        size = self.sizes["heading"]

        if decoration is HeadingDecoration.BAND:
            self._shading(paragraph, self.skin.accent_color)
            self._run(
                paragraph,
                f"  {block.title}  ",
                size=size,
                bold=True,
                color=_WHITE,
                all_caps=True,
            )
        elif decoration is HeadingDecoration.SPACED:
            run = self._run(
                paragraph,
                block.title,
                size=size,
                color=self.skin.heading_color,
                all_caps=True,
            )
            self._character_spacing(run, points_to_twips(self.skin.heading_letter_spacing))
        else:
            self._bottom_border(paragraph, self.skin.rule_color)
            self._run(
                paragraph,
                block.title,
                size=size,
                bold=True,
                color=self.skin.heading_color,
                all_caps=True,
            )

        before, after = _HEADING_SPACING[decoration]
        self._spacing(paragraph, before=before, after=after)

    def _two_column(self, block: TwoColumnLineBlock) -> None:
        paragraph = self._paragraph()
        paragraph.paragraph_format.tab_stops.add_tab_stop(
            Twips(self.skin.geometry.right_tab_twips), WD_TAB_ALIGNMENT.RIGHT
        )
        self._spacing(paragraph, before=_LINE_SPACING_BEFORE.get(block.role, 0))
        for span in block.left:
            self._span(paragraph, span)
        self._run(paragraph, f"\t{block.right}")

    def _bullet(self, text: str) -> None:
        paragraph = self._paragraph()
        num_pr = paragraph._p.get_or_add_pPr().get_or_add_numPr()
        num_pr.get_or_add_ilvl().val = BULLET_LEVEL
        num_pr.get_or_add_numId().val = self.num_id
        self._run(paragraph, text)

    def _bottom_border(self, paragraph, color: str) -> None:
        p_pr = paragraph._p.get_or_add_pPr()
        border = OxmlElement("w:pBdr")
        bottom = OxmlElement("w:bottom")
        bottom.set(qn("w:val"), "single")
        bottom.set(qn("w:sz"), _RULE_SIZE)
        bottom.set(qn("w:space"), "1")
        bottom.set(qn("w:color"), color)
        border.append(bottom)
        p_pr.insert_element_before(border, *_successors(_PPR_SEQUENCE, "w:pBdr"))

    def _shading(self, paragraph, color: str) -> None:
        p_pr = paragraph._p.get_or_add_pPr()
        shading = OxmlElement("w:shd")
        shading.set(qn("w:val"), "solid")
        shading.set(qn("w:color"), color)
        shading.set(qn("w:fill"), color)
        p_pr.insert_element_before(shading, *_successors(_PPR_SEQUENCE, "w:shd"))

    def _mark_size(self, paragraph, half_points: str) -> None:
        """Size the paragraph mark so an empty paragraph draws at that height."""
        p_pr = paragraph._p.get_or_add_pPr()
        r_pr = OxmlElement("w:rPr")
        size = OxmlElement("w:sz")
        size.set(qn("w:val"), half_points)
        r_pr.append(size)
        p_pr.insert_element_before(r_pr, *_successors(_PPR_SEQUENCE, "w:rPr"))

    def _character_spacing(self, run, twips: int) -> None:
        if twips <= 0:
            return
        r_pr = run._r.get_or_add_rPr()
        spacing = OxmlElement("w:spacing")
        spacing.set(qn("w:val"), str(twips))
        r_pr.insert_element_before(spacing, *_successors(_RPR_SEQUENCE, "w:spacing"))
