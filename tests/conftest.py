from pathlib import Path

import pytest

from src.adapters.fs.filestore import LocalFileWriter
from src.rules.loader import load_rules
from src.rules.models import Rules
from src.shell.commands import CommandRegistry, build_registry

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """The project's real rules file."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def writer() -> LocalFileWriter:
    return LocalFileWriter()


@pytest.fixture
def registry(writer: LocalFileWriter, rules: Rules) -> CommandRegistry:
    """Dispatch table backed by the real filesystem adapter."""
    return build_registry(writer, enabled=rules.commands.enabled)


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """An existing, writable destination directory."""
    out = tmp_path / "out"
    out.mkdir()
    return out
