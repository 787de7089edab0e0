"""Main Rendering Service.

Validates resume payloads at the boundary, resolves the template skin,
plans the layout once and hands the plan to the requested target.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.rendering.config import RenderingConfig, get_rendering_config
from src.rendering.docx_renderer import DOCX_CONTENT_TYPE, DocxRenderer
from src.rendering.exceptions import DocumentEncodingError, InvalidResumeError
from src.rendering.pdf_renderer import PDF_CONTENT_TYPE, PDFRenderer
from src.rendering.planner import LayoutPlan, LayoutPlanner
from src.rendering.preview import PreviewDocument, PreviewRenderer, PreviewState
from src.rendering.registry import TemplateRegistry, default_registry
from src.rendering.skins import TemplateSkin
from src.resume.models import ResumeData, TailoringOverlay

logger = logging.getLogger(__name__)

ENCODING_FAILURE_MESSAGE = "Failed to generate resume document"
MISSING_NAME_MESSAGE = "Missing or empty 'name' field"


@dataclass
class RenderResult:
    """Result of a document rendering operation."""

    success: bool
    content: bytes | None = None
    content_type: str | None = None
    filename: str | None = None
    template: str | None = None
    error: str | None = None
    rendered_at: datetime = field(default_factory=datetime.now)

    def write_to(self, directory: Path | str) -> Path:
        """Save the payload under its suggested filename.

        Returns:
            Path of the written file.

        Raises:
            ValueError: If the render did not succeed.
        """
        if not self.success or self.content is None or self.filename is None:
            raise ValueError(f"Nothing to write: {self.error or 'no content'}")

        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_bytes(self.content)
        logger.info(f"Wrote {self.filename} to {directory}")
        return path


def parse_resume_payload(payload: Any) -> ResumeData:
    """Validate an untrusted resume payload.

    Args:
        payload: Decoded JSON body.

    Returns:
        Validated ResumeData.

    Raises:
        InvalidResumeError: If the payload is not a usable resume.
    """
    if not isinstance(payload, dict):
        raise InvalidResumeError("Resume payload must be a JSON object")

    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        raise InvalidResumeError(MISSING_NAME_MESSAGE)

    try:
        return ResumeData.from_dict(payload)
    except ValidationError as e:
        raise InvalidResumeError(f"Invalid resume: {e}", original_error=e) from e


class RenderingService:
    """Entry point for producing documents and previews.

    One plan feeds every target:
    1. Resolve the template skin from the registry
    2. Plan the blocks
    3. Lower the plan to DOCX, PDF or the preview tree
    """

    def __init__(
        self,
        config: RenderingConfig | None = None,
        registry: TemplateRegistry | None = None,
        planner: LayoutPlanner | None = None,
    ):
        """Initialize the rendering service.

        Args:
            config: Optional RenderingConfig. Uses global config if not provided.
            registry: Template registry. Defaults to the built-in templates.
            planner: Layout planner.
        """
        self.config = config or get_rendering_config()
        self.registry = registry or default_registry()
        self.planner = planner or LayoutPlanner()

        self.docx_renderer = DocxRenderer()
        self.pdf_renderer = PDFRenderer(config=self.config)
        self.preview_renderer = PreviewRenderer(config=self.config)

    def resolve_skin(self, template: str | None = None) -> TemplateSkin:
        """Look up a skin, falling back to the configured default identifier.

        Raises:
            UnknownTemplateError: If the identifier is not registered.
        """
        if template is None:
            template = self.config.default_template
        return self.registry.skin(template)

    def plan(self, resume: ResumeData, template: str | None = None) -> LayoutPlan:
        return self.planner.plan(resume, self.resolve_skin(template))

    async def render_docx(
        self, resume: ResumeData, template: str | None = None
    ) -> RenderResult:
        """Render a resume to DOCX.

        Raises:
            UnknownTemplateError: If the template identifier is not registered.
        """
        plan = self.plan(resume, template)
        return await self._encode(
            plan, self.docx_renderer.render_async, DOCX_CONTENT_TYPE, "docx"
        )

    async def render_pdf(
        self, resume: ResumeData, template: str | None = None
    ) -> RenderResult:
        """Render a resume to PDF.

        Raises:
            UnknownTemplateError: If the template identifier is not registered.
        """
        plan = self.plan(resume, template)
        return await self._encode(
            plan, self.pdf_renderer.render_async, PDF_CONTENT_TYPE, "pdf"
        )

    async def render(
        self, resume: ResumeData, template: str | None = None, fmt: str = "docx"
    ) -> RenderResult:
        """Render a resume to the named binary format ("docx" or "pdf")."""
        if fmt == "docx":
            return await self.render_docx(resume, template)
        if fmt == "pdf":
            return await self.render_pdf(resume, template)
        raise ValueError(f"Unsupported format: {fmt}")

    def render_html(self, resume: ResumeData, template: str | None = None) -> str:
        """Render the intermediate print HTML without producing a PDF."""
        return self.pdf_renderer.render_html(self.plan(resume, template))

    def render_preview(
        self,
        resume: ResumeData | None,
        template: str | None = None,
        overlay: TailoringOverlay | None = None,
    ) -> PreviewDocument:
        """Build the preview tree, or the empty state when there is no resume."""
        plan = self.plan(resume, template) if resume is not None else None
        return self.preview_renderer.render(plan, overlay)

    def render_preview_state(
        self, state: PreviewState, template: str | None = None
    ) -> PreviewDocument:
        return self.render_preview(state.resume, template, state.overlay)

    def preview_html(
        self,
        resume: ResumeData | None,
        template: str | None = None,
        overlay: TailoringOverlay | None = None,
    ) -> str:
        plan = self.plan(resume, template) if resume is not None else None
        document = self.preview_renderer.render(plan, overlay)
        return self.preview_renderer.to_html(document, plan)

    async def _encode(
        self, plan: LayoutPlan, encode, content_type: str, extension: str
    ) -> RenderResult:
        slug = plan.skin.slug
        logger.info(f"Rendering {extension.upper()} with template {slug}")

        try:
            content = await encode(plan)
        except DocumentEncodingError as e:
            logger.error(f"{extension.upper()} encoding failed: {e}")
            return RenderResult(
                success=False,
                template=slug,
                error=ENCODING_FAILURE_MESSAGE,
            )

        logger.info(f"Rendered {extension.upper()} ({len(content)} bytes)")
        return RenderResult(
            success=True,
            content=content,
            content_type=content_type,
            filename=f"{self.config.filename_base}.{extension}",
            template=slug,
        )
