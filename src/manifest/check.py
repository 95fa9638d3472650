import json
import sys
from pathlib import Path
from typing import Any

ALLOWED_ROOTS = {
    "adapters",
    "api",
    "app_shell",
    "components",
    "manifest",
    "rules",
    "shell",
    "ui",
}

IGNORE = {"__pycache__", ".DS_Store", "__init__.py"}

COMPONENT_FILES = ("__init__.py", "component.py", "models.py", "ports.py")

MANIFEST_PATH = Path("manifests/component_manifest.json")


def load_manifest(manifest_path: Path) -> dict[str, Any]:
    with open(manifest_path) as f:
        manifest: dict[str, Any] = json.load(f)
    return manifest


def _missing_files(package: Path, required: tuple[str, ...]) -> list[str]:
    return [name for name in required if not (package / name).is_file()]


def check_structure(root_path: Path = Path("src")) -> list[str]:
    """
    Lint the src/ tree.

    Top-level entries must be allowed packages, and every directory under
    components/ must be a complete component (COMPONENT_FILES).
    """
    if not root_path.exists():
        return ["src directory not found!"]

    errors = []
    for entry in sorted(root_path.iterdir()):
        if entry.name in IGNORE:
            continue
        if entry.is_file():
            errors.append(f"Illegal file in src/ root: '{entry.name}'")
        elif entry.name not in ALLOWED_ROOTS:
            errors.append(f"Illegal dir in src/: '{entry.name}'. Allowed: {sorted(ALLOWED_ROOTS)}")
        elif _missing_files(entry, ("__init__.py",)):
            errors.append(f"Missing __init__.py in package: '{entry.name}'")

    components_dir = root_path / "components"
    if components_dir.is_dir():
        for comp_dir in sorted(p for p in components_dir.iterdir() if p.is_dir()):
            if comp_dir.name in IGNORE:
                continue
            for name in _missing_files(comp_dir, COMPONENT_FILES):
                errors.append(f"Component '{comp_dir.name}' is missing {name}")

    return errors


def check_manifest(manifest_path: Path, root_path: Path = Path("src")) -> list[str]:
    """Manifest and components/ must list the same components; ports must exist."""
    if not manifest_path.is_file():
        return [f"Manifest not found: {manifest_path}"]

    manifest = load_manifest(manifest_path)
    errors: list[str] = []

    listed = {c["name"] for c in manifest.get("components", [])}
    components_dir = root_path / "components"
    present = (
        {p.name for p in components_dir.iterdir() if p.is_dir() and p.name not in IGNORE}
        if components_dir.is_dir()
        else set()
    )
    for name in sorted(listed - present):
        errors.append(f"Component '{name}' is in the manifest but not in src/components")
    for name in sorted(present - listed):
        errors.append(f"Component '{name}' is not listed in the manifest")

    for port in manifest.get("ports", []):
        if not (root_path.parent / port["module"]).is_file():
            errors.append(f"Port '{port['name']}' module not found: {port['module']}")

    return errors


if __name__ == "__main__":
    violations = check_structure() + check_manifest(MANIFEST_PATH)
    if violations:
        print("Architectural Violations Found:")
        for v in violations:
            print(f"  - {v}")
        sys.exit(1)
    else:
        print("Architecture Integrity Check: PASS")
        sys.exit(0)
