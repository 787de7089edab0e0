"""Resume rendering module.

This module provides functionality for:
- Planning a resume into an ordered list of layout blocks
- Rendering the plan to DOCX with python-docx
- Rendering the plan to PDF with Jinja2 and WeasyPrint
- Building the live preview tree with match score and keyword chips

Main Entry Point:
    RenderingService - Resolves the template, plans once, renders any target

Example:
    from src.rendering import RenderingService, parse_resume_payload

    service = RenderingService()
    resume = parse_resume_payload(payload)
    result = await service.render_docx(resume, template="modern")

    if result.success:
        result.write_to("output")
"""

from src.rendering.blocks import (
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
from src.rendering.config import (
    RenderingConfig,
    get_rendering_config,
    reset_rendering_config,
)
from src.rendering.docx_renderer import DocxRenderer
from src.rendering.exceptions import (
    DocumentEncodingError,
    InvalidResumeError,
    RenderingError,
    UnknownTemplateError,
)
from src.rendering.pdf_renderer import PDFRenderer
from src.rendering.planner import LayoutPlan, LayoutPlanner
from src.rendering.preview import (
    KeywordChip,
    PreviewDocument,
    PreviewNode,
    PreviewRenderer,
    PreviewState,
    ScoreBadge,
)
from src.rendering.registry import (
    SubscriptionTier,
    TemplateInfo,
    TemplateRegistry,
    default_registry,
)
from src.rendering.service import RenderingService, RenderResult, parse_resume_payload
from src.rendering.skins import BUILTIN_SKINS, HeadingDecoration, TemplateSkin

__all__ = [
    # Main service
    "RenderingService",
    "RenderResult",
    "parse_resume_payload",
    # Configuration
    "RenderingConfig",
    "get_rendering_config",
    "reset_rendering_config",
    # Templates
    "TemplateRegistry",
    "TemplateInfo",
    "SubscriptionTier",
    "default_registry",
    "TemplateSkin",
    "HeadingDecoration",
    "BUILTIN_SKINS",
    # Planning
    "LayoutPlanner",
    "LayoutPlan",
    "NameBlock",
    "ContactBlock",
    "DividerBlock",
    "HeadingBlock",
    "TwoColumnLineBlock",
    "TextLineBlock",
    "BulletListBlock",
    "TextSpan",
    "LineRole",
    "SectionKind",
    # Renderers
    "DocxRenderer",
    "PDFRenderer",
    "PreviewRenderer",
    "PreviewState",
    "PreviewDocument",
    "PreviewNode",
    "ScoreBadge",
    "KeywordChip",
    # Errors
    "RenderingError",
    "UnknownTemplateError",
    "InvalidResumeError",
    "DocumentEncodingError",
]
