"""
Structure lint tests.
Verify that the component skeleton exists and follows conventions.
"""

import json
from pathlib import Path

from src.manifest.check import check_manifest, check_structure

PROJECT_ROOT = Path(__file__).parent.parent


class TestProjectStructure:
    """Verify project structure follows conventions."""

    def test_src_layout_is_clean(self) -> None:
        assert check_structure(PROJECT_ROOT / "src") == []

    def test_tests_structure_exists(self) -> None:
        """Test directories must follow conventions."""
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "integration").is_dir()
        assert (PROJECT_ROOT / "tests" / "api").is_dir()

    def test_component_manifest_exists_and_valid(self) -> None:
        """Component manifest must exist and be valid JSON."""
        manifest_path = PROJECT_ROOT / "manifests" / "component_manifest.json"
        assert manifest_path.is_file(), "component_manifest.json must exist"

        with open(manifest_path) as f:
            manifest = json.load(f)

        assert manifest.get("schema_version") == "1.0"
        assert manifest.get("project_slug") == "circuit-explorer"
        assert len(manifest["components"]) == 1
        assert len(manifest["ports"]) == 1

    def test_manifest_matches_tree(self) -> None:
        manifest_path = PROJECT_ROOT / "manifests" / "component_manifest.json"
        assert check_manifest(manifest_path, PROJECT_ROOT / "src") == []


class TestCheckStructure:
    def test_flags_unknown_root(self, tmp_path: Path) -> None:
        (tmp_path / "misc").mkdir()
        errors = check_structure(tmp_path)
        assert len(errors) == 1
        assert "Illegal dir" in errors[0]

    def test_flags_missing_init(self, tmp_path: Path) -> None:
        (tmp_path / "rules").mkdir()
        assert check_structure(tmp_path) == ["Missing __init__.py in package: 'rules'"]

    def test_flags_stray_file(self, tmp_path: Path) -> None:
        (tmp_path / "loose.py").write_text("")
        assert "Illegal file" in check_structure(tmp_path)[0]

    def test_flags_incomplete_component(self, tmp_path: Path) -> None:
        comp = tmp_path / "components" / "partial"
        comp.mkdir(parents=True)
        (tmp_path / "components" / "__init__.py").write_text("")
        (comp / "__init__.py").write_text("")
        (comp / "component.py").write_text("")

        errors = check_structure(tmp_path)

        assert errors == [
            "Component 'partial' is missing models.py",
            "Component 'partial' is missing ports.py",
        ]


class TestCheckManifest:
    def _write_manifest(self, path: Path, names: list[str]) -> Path:
        manifest_path = path / "component_manifest.json"
        manifest_path.write_text(
            json.dumps({"components": [{"name": n} for n in names], "ports": []})
        )
        return manifest_path

    def test_flags_unlisted_component(self, tmp_path: Path) -> None:
        (tmp_path / "src" / "components" / "extra").mkdir(parents=True)
        manifest_path = self._write_manifest(tmp_path, [])

        errors = check_manifest(manifest_path, tmp_path / "src")

        assert errors == ["Component 'extra' is not listed in the manifest"]

    def test_flags_missing_component(self, tmp_path: Path) -> None:
        (tmp_path / "src" / "components").mkdir(parents=True)
        manifest_path = self._write_manifest(tmp_path, ["ghost"])

        errors = check_manifest(manifest_path, tmp_path / "src")

        assert errors == ["Component 'ghost' is in the manifest but not in src/components"]

    def test_missing_manifest(self, tmp_path: Path) -> None:
        assert check_manifest(tmp_path / "nope.json") == [
            f"Manifest not found: {tmp_path / 'nope.json'}"
        ]
