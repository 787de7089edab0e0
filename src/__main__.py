"""Main entry point for the resume engine."""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from src import __version__
from src.config.settings import Settings
from src.utils.logging import configure_logging

FORMATS = ("docx", "pdf", "html")


def _load_json(path: Path) -> object:
    return json.loads(path.read_text(encoding="utf-8"))


def _describe_block(block) -> str:
    kind = block.kind
    if kind in ("name", "contact"):
        return f"{kind}: {block.text}"
    if kind == "heading":
        return f"heading [{block.section.value}]: {block.title}"
    if kind == "two_column":
        return f"{block.role.value}: {block.left_text} | {block.right}"
    if kind == "text":
        return f"{block.role.value}: {block.text}"
    if kind == "bullets":
        return f"bullets ({len(block.items)})"
    return kind


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="resume-engine",
        description="Resume rendering engine: DOCX, PDF and HTML from resume JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src render resume.json --template modern --format pdf
  python -m src plan resume.json
  python -m src templates
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="commands",
        description="Available commands",
    )

    render_parser = subparsers.add_parser(
        "render",
        help="Render a resume JSON file to a document",
    )
    render_parser.add_argument(
        "resume",
        type=Path,
        help="Path to the resume JSON file",
    )
    render_parser.add_argument(
        "--template",
        default=None,
        help="Template identifier (defaults to settings)",
    )
    render_parser.add_argument(
        "--format",
        dest="fmt",
        choices=FORMATS,
        default="docx",
        help="Output format",
    )
    render_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output directory (defaults to OUTPUT_DIR)",
    )

    plan_parser = subparsers.add_parser(
        "plan",
        help="Print the block outline for a resume JSON file",
    )
    plan_parser.add_argument(
        "resume",
        type=Path,
        help="Path to the resume JSON file",
    )
    plan_parser.add_argument(
        "--template",
        default=None,
        help="Template identifier (defaults to settings)",
    )

    subparsers.add_parser(
        "templates",
        help="List available templates",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    # Load settings
    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Configure logging
    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    # If no command specified, show help
    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"resume-engine v{__version__} running {parsed.mode}")

    from src.rendering.exceptions import RenderingError
    from src.rendering.service import RenderingService, parse_resume_payload

    service = RenderingService()

    if parsed.mode == "templates":
        for info in service.registry.all():
            print(f"{info.slug:<10} {info.tier.value:<7} {info.name}: {info.description}")
        return 0

    template = parsed.template if parsed.template is not None else settings.default_template

    try:
        payload = _load_json(parsed.resume)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: could not read {parsed.resume}: {e}", file=sys.stderr)
        return 1

    try:
        resume = parse_resume_payload(payload)

        if parsed.mode == "plan":
            plan = service.plan(resume, template)
            print(f"Template: {plan.skin.slug}")
            for block in plan:
                print(_describe_block(block))
            return 0

        if parsed.mode == "render":
            out_dir: Path = parsed.out or settings.output_dir

            if parsed.fmt == "html":
                html = service.render_html(resume, template)
                out_dir.mkdir(parents=True, exist_ok=True)
                path = out_dir / f"{service.config.filename_base}.html"
                path.write_text(html, encoding="utf-8")
                print(f"Wrote: {path}")
                return 0

            result = asyncio.run(service.render(resume, template, parsed.fmt))
            if not result.success:
                print(f"Error: {result.error}", file=sys.stderr)
                return 1

            path = result.write_to(out_dir)
            print(f"Wrote: {path}")
            return 0
    except RenderingError as e:
        logger.error(f"{parsed.mode} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
