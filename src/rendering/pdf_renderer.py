"""PDF Renderer using WeasyPrint.

Renders layout plans to fixed-layout PDF using an HTML/CSS template.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from weasyprint import HTML

from src.rendering.config import (
    PACKAGE_TEMPLATE_DIR,
    RenderingConfig,
    get_rendering_config,
)
from src.rendering.exceptions import DocumentEncodingError
from src.rendering.geometry import BULLET_INDENT
from src.rendering.planner import LayoutPlan

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def create_template_environment(template_dir: Path) -> Environment:
    """Create the Jinja2 environment shared by the print and preview targets."""
    if not template_dir.exists():
        # Use default templates from package
        template_dir = PACKAGE_TEMPLATE_DIR

    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


class PDFRenderer:
    """PDF renderer for resumes.

    Uses a Jinja2 template and WeasyPrint to lay the planned blocks out on
    US Letter pages. Content that does not fit flows onto further pages.
    """

    def __init__(self, config: RenderingConfig | None = None):
        """Initialize the PDF renderer.

        Args:
            config: Optional RenderingConfig. Uses global config if not provided.
        """
        self.config = config or get_rendering_config()
        self.jinja_env = create_template_environment(self.config.template_dir)

    def render_html(self, plan: LayoutPlan) -> str:
        """Render a plan to the intermediate print HTML.

        Args:
            plan: Planned blocks and skin.

        Returns:
            Rendered HTML string.
        """
        template = self.jinja_env.get_template(self.config.print_template)
        skin = plan.skin
        return template.render(
            blocks=plan.blocks,
            skin=skin,
            geometry=skin.geometry,
            bullet_indent=BULLET_INDENT,
            title=next((b.text for b in plan.blocks if b.kind == "name"), "Resume"),
        )

    def render(self, plan: LayoutPlan) -> bytes:
        """Render a plan to PDF bytes.

        Raises:
            DocumentEncodingError: If HTML rendering or PDF layout fails.
        """
        try:
            html_content = self.render_html(plan)
            payload = HTML(
                string=html_content, base_url=str(self.config.template_dir)
            ).write_pdf()
        except Exception as e:
            raise DocumentEncodingError(
                f"Failed to encode PDF for template {plan.skin.slug}: {e}",
                original_error=e,
            ) from e

        logger.debug(f"Encoded PDF ({len(payload)} bytes, {len(plan)} blocks)")
        return payload

    async def render_async(self, plan: LayoutPlan) -> bytes:
        """Render a plan off the event loop as one unit of work."""
        return await asyncio.to_thread(self.render, plan)
