"""Screen preview renderer.

Lowers a layout plan into a small tree of display nodes for the live
preview pane, with the match-score badge and keyword chips drawn from the
latest tailoring result. The overlay is display-only; nothing here writes
back into the resume.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.rendering.blocks import (
    BulletListBlock,
    ContactBlock,
    DividerBlock,
    HeadingBlock,
    NameBlock,
    TextLineBlock,
    TextSpan,
    TwoColumnLineBlock,
)
from src.rendering.config import RenderingConfig, get_rendering_config
from src.rendering.pdf_renderer import create_template_environment
from src.rendering.planner import LayoutPlan
from src.rendering.skins import TemplateSkin
from src.resume.models import ResumeData, TailoringOverlay

logger = logging.getLogger(__name__)

EMPTY_STATE_MESSAGE = "Your resume will appear here as you chat."

HIGH_SCORE_THRESHOLD = 80
MEDIUM_SCORE_THRESHOLD = 60


@dataclass
class PreviewNode:
    """One element of the preview tree."""

    kind: str
    text: str = ""
    right: str = ""
    classes: tuple[str, ...] = ()
    children: list[PreviewNode] = field(default_factory=list)


@dataclass
class ScoreBadge:
    score: int
    tone: str

    @property
    def label(self) -> str:
        return f"Match {self.score}%"

    @classmethod
    def from_score(cls, score: int) -> ScoreBadge:
        if score >= HIGH_SCORE_THRESHOLD:
            tone = "high"
        elif score >= MEDIUM_SCORE_THRESHOLD:
            tone = "medium"
        else:
            tone = "low"
        return cls(score=score, tone=tone)


@dataclass
class KeywordChip:
    text: str
    status: str  # "found" or "missing"


@dataclass
class PreviewDocument:
    """Everything the preview pane needs to draw one frame."""

    is_empty: bool
    message: str = ""
    template: str = ""
    badge: ScoreBadge | None = None
    chips: list[KeywordChip] = field(default_factory=list)
    nodes: list[PreviewNode] = field(default_factory=list)

    def texts(self) -> list[str]:
        """Flatten node text in display order (handy for assertions and search)."""
        out: list[str] = []

        def walk(nodes: list[PreviewNode]) -> None:
            for node in nodes:
                if node.text:
                    out.append(node.text)
                if node.right:
                    out.append(node.right)
                if node.kind != "row" and node.kind != "line":
                    walk(node.children)

        walk(self.nodes)
        return out


def _span_node(span: TextSpan, accent_enabled: bool) -> PreviewNode:
    classes = []
    if span.bold:
        classes.append("bold")
    if span.italic:
        classes.append("italic")
    if span.accent and accent_enabled:
        classes.append("accent")
    return PreviewNode(kind="span", text=span.text, classes=tuple(classes))


class PreviewRenderer:
    """Builds PreviewDocuments and renders them to HTML."""

    def __init__(self, config: RenderingConfig | None = None):
        self.config = config or get_rendering_config()
        self.jinja_env = create_template_environment(self.config.template_dir)

    def render(
        self,
        plan: LayoutPlan | None,
        overlay: TailoringOverlay | None = None,
    ) -> PreviewDocument:
        """Build the preview tree.

        Args:
            plan: Layout plan, or None when no resume exists yet.
            overlay: Latest tailoring result, if any.

        Returns:
            PreviewDocument. With no plan this is the empty state.
        """
        if plan is None:
            return PreviewDocument(is_empty=True, message=EMPTY_STATE_MESSAGE)

        skin = plan.skin
        nodes = [self._lower(block, skin) for block in plan]

        document = PreviewDocument(
            is_empty=False,
            template=skin.slug,
            nodes=nodes,
        )
        if overlay is not None:
            document.badge = ScoreBadge.from_score(overlay.match_score)
            if overlay.keywords is not None:
                document.chips = [
                    KeywordChip(text=k, status="found") for k in overlay.keywords.found
                ] + [
                    KeywordChip(text=k, status="missing")
                    for k in overlay.keywords.missing
                ]

        logger.debug(
            f"Built preview with {len(nodes)} nodes and {len(document.chips)} chips"
        )
        return document

    def _lower(self, block, skin: TemplateSkin) -> PreviewNode:
        accent_enabled = skin.accent_role_titles
        if isinstance(block, NameBlock):
            return PreviewNode(kind="name", text=block.text)
        if isinstance(block, ContactBlock):
            return PreviewNode(kind="contact", text=block.text)
        if isinstance(block, DividerBlock):
            return PreviewNode(kind="divider", classes=(skin.divider_style.value,))
        if isinstance(block, HeadingBlock):
            return PreviewNode(
                kind="heading", text=block.title, classes=(block.section.value,)
            )
        if isinstance(block, TwoColumnLineBlock):
            return PreviewNode(
                kind="row",
                text=block.left_text,
                right=block.right,
                classes=(block.role.value,),
                children=[_span_node(s, accent_enabled) for s in block.left],
            )
        if isinstance(block, TextLineBlock):
            return PreviewNode(
                kind="line",
                text=block.text,
                classes=(block.role.value,),
                children=[_span_node(s, accent_enabled) for s in block.spans],
            )
        if isinstance(block, BulletListBlock):
            return PreviewNode(
                kind="list",
                children=[PreviewNode(kind="item", text=item) for item in block.items],
            )
        raise TypeError(f"Unsupported block type: {type(block).__name__}")

    def to_html(self, document: PreviewDocument, plan: LayoutPlan | None = None) -> str:
        """Render a preview document to an HTML fragment.

        Args:
            document: Tree from render().
            plan: The plan it was built from, for skin styling. Omit for the
                empty state.
        """
        template = self.jinja_env.get_template(self.config.preview_template)
        return template.render(
            document=document,
            skin=plan.skin if plan is not None else None,
        )


class PreviewState:
    """Current resume and tailoring overlay behind the preview pane.

    The overlay only changes through the explicit transitions below. A chat
    turn that carries no tailoring result keeps the previous overlay unless
    the configuration asks for it to be cleared.
    """

    def __init__(self, config: RenderingConfig | None = None):
        self.config = config or get_rendering_config()
        self.resume: ResumeData | None = None
        self.overlay: TailoringOverlay | None = None

    def update_resume(self, resume: ResumeData) -> None:
        self.resume = resume

    def update_tailoring(self, overlay: TailoringOverlay) -> None:
        self.overlay = overlay

    def clear_tailoring(self) -> None:
        self.overlay = None

    def apply_turn(
        self,
        resume: ResumeData | None = None,
        overlay: TailoringOverlay | None = None,
    ) -> None:
        """Apply the outcome of one chat turn."""
        if resume is not None:
            self.update_resume(resume)

        if overlay is not None:
            self.update_tailoring(overlay)
        elif self.config.clear_overlay_on_plain_turn and self.overlay is not None:
            logger.debug("Clearing tailoring overlay after plain turn")
            self.clear_tailoring()
