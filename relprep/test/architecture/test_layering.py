from __future__ import annotations

import ast
from pathlib import Path

import pytest


def _package_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _source_files() -> list[Path]:
    root = _package_root()
    files: list[Path] = []
    for path in sorted(root.rglob("*.py")):
        rel = path.relative_to(root)
        if rel.parts[0] == "test" or "__pycache__" in rel.parts:
            continue
        files.append(path)
    return files


def _imports(path: Path) -> list[tuple[str, int]]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    out: list[tuple[str, int]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            out.extend((alias.name, node.lineno) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
            out.append((node.module, node.lineno))
    return out


def _matches(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def test_subprocess_only_in_process_module() -> None:
    root = _package_root()
    offenders = [
        f"{path.relative_to(root)}:{line}"
        for path in _source_files()
        if path.relative_to(root).as_posix() != "platform/process.py"
        for module, line in _imports(path)
        if module == "subprocess"
    ]
    assert not offenders, "subprocess imported outside platform/process.py:\n" + "\n".join(offenders)


@pytest.mark.parametrize(
    ("layer", "forbidden"),
    [
        ("core", ("relprep.platform", "relprep.git", "relprep.release", "relprep.cli")),
        ("platform", ("relprep.git", "relprep.release", "relprep.cli")),
        ("git", ("relprep.release", "relprep.changelog", "relprep.cli")),
        ("changelog", ("relprep.release", "relprep.cli")),
        ("release", ("relprep.cli",)),
    ],
)
def test_layer_dependencies(layer: str, forbidden: tuple[str, ...]) -> None:
    root = _package_root()
    offenders: list[str] = []
    for path in _source_files():
        rel = path.relative_to(root)
        if rel.parts[0] != layer:
            continue
        for module, line in _imports(path):
            if any(_matches(module, prefix) for prefix in forbidden):
                offenders.append(f"{rel}:{line}: forbidden import '{module}'")

    assert not offenders, f"{layer} layering violations:\n" + "\n".join(offenders)
