from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from src.rendering.service import RenderResult


@pytest.fixture
def resume_file(tmp_path, full_resume_payload) -> Path:
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(full_resume_payload), encoding="utf-8")
    return path


def test_cli_without_command_prints_help(capsys) -> None:
    from src.__main__ import main

    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_cli_templates_lists_registry(capsys) -> None:
    from src.__main__ import main

    assert main(["templates"]) == 0

    out = capsys.readouterr().out
    for slug in ("classic", "modern", "creative", "minimal"):
        assert slug in out
    assert "FREE" in out


def test_cli_plan_prints_outline(resume_file, capsys) -> None:
    from src.__main__ import main

    assert main(["plan", str(resume_file), "--template", "modern"]) == 0

    out = capsys.readouterr().out
    assert "Template: modern" in out
    assert "name: Jane Doe" in out
    assert "heading [education]: Education" in out
    assert "role_line: Software Engineer | Jul 2019 - Dec 2021" in out


def test_cli_render_docx_writes_file(resume_file, tmp_path) -> None:
    from src.__main__ import main

    out_dir = tmp_path / "out"
    exit_code = main(
        ["render", str(resume_file), "--format", "docx", "--out", str(out_dir)]
    )

    assert exit_code == 0
    assert (out_dir / "resume.docx").read_bytes()[:4] == b"PK\x03\x04"


def test_cli_render_html_writes_file(resume_file, tmp_path) -> None:
    from src.__main__ import main

    out_dir = tmp_path / "out"
    exit_code = main(
        [
            "render",
            str(resume_file),
            "--format",
            "html",
            "--template",
            "creative",
            "--out",
            str(out_dir),
        ]
    )

    assert exit_code == 0
    assert "Jane Doe" in (out_dir / "resume.html").read_text(encoding="utf-8")


def test_cli_render_failure_exits_nonzero(resume_file, tmp_path, monkeypatch) -> None:
    from src.__main__ import main

    mock = AsyncMock(
        return_value=RenderResult(success=False, error="Failed to generate resume document")
    )
    monkeypatch.setattr("src.rendering.service.RenderingService.render", mock)

    exit_code = main(["render", str(resume_file), "--out", str(tmp_path)])

    assert exit_code == 1
    mock.assert_awaited_once()


def test_cli_unknown_template_errors_cleanly(resume_file, capsys) -> None:
    from src.__main__ import main

    assert main(["plan", str(resume_file), "--template", "fancy"]) == 1
    assert "Unknown template" in capsys.readouterr().err


def test_cli_empty_template_errors_cleanly(resume_file, capsys) -> None:
    from src.__main__ import main

    assert main(["plan", str(resume_file), "--template", ""]) == 1
    assert "Unknown template" in capsys.readouterr().err


def test_cli_invalid_resume_errors_cleanly(tmp_path, capsys) -> None:
    from src.__main__ import main

    path = tmp_path / "resume.json"
    path.write_text(json.dumps({"name": "", "contactLine1": "x"}), encoding="utf-8")

    assert main(["render", str(path)]) == 1
    assert "Missing or empty 'name' field" in capsys.readouterr().err


def test_cli_missing_file_errors_cleanly(tmp_path) -> None:
    from src.__main__ import main

    assert main(["plan", str(tmp_path / "missing.json")]) == 1


def test_cli_parser_supports_subcommands() -> None:
    from src.__main__ import create_parser

    parser = create_parser()

    render_args = parser.parse_args(
        ["render", "resume.json", "--template", "minimal", "--format", "pdf"]
    )
    assert render_args.mode == "render"
    assert render_args.template == "minimal"
    assert render_args.fmt == "pdf"

    assert parser.parse_args(["plan", "resume.json"]).mode == "plan"
    assert parser.parse_args(["templates"]).mode == "templates"
