"""
Host CLI tests.
"""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from src.app_shell import cli

PROJECT_ROOT = Path(__file__).parent.parent.parent

RULES = str(PROJECT_ROOT / "rules.yaml")


def test_lists_commands(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["--rules", RULES, "commands"])
    assert capsys.readouterr().out.split() == ["save_visualization"]


def test_check_rules(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["--rules", RULES, "check_rules"])
    assert "Rules OK: circuit-explorer" in capsys.readouterr().out


def test_save_from_file(
    tmp_path: Path, out_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "in.bin"
    source.write_bytes(b"\x00\x01\x02")
    target = out_dir / "render.bin"

    cli.main(["--rules", RULES, "save", str(target), "--input", str(source)])

    assert target.read_bytes() == b"\x00\x01\x02"
    assert json.loads(capsys.readouterr().out) == {"success": True, "path": str(target)}


def test_save_from_stdin(out_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fake_stdin = io.TextIOWrapper(io.BytesIO(b"piped"))
    monkeypatch.setattr("sys.stdin", fake_stdin)
    target = out_dir / "piped.bin"

    cli.main(["--rules", RULES, "save", str(target)])

    assert target.read_bytes() == b"piped"


def test_save_failure_exits_nonzero(tmp_path: Path) -> None:
    source = tmp_path / "in.bin"
    source.write_bytes(b"x")

    with pytest.raises(SystemExit) as exc_info:
        cli.main(
            ["--rules", RULES, "save", str(tmp_path / "missing" / "x.bin"), "--input", str(source)]
        )

    assert exc_info.value.code == 1


def test_missing_rules_exits_nonzero(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--rules", str(tmp_path / "nope.yaml"), "commands"])
    assert exc_info.value.code == 1
