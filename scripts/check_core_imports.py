#!/usr/bin/env python3
"""
Fail if the transport core imports the resource layer.
Checks all Python files under src/relay_client/core/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
CORE_DIR = REPO_ROOT / "src" / "relay_client" / "core"

FORBIDDEN_PREFIXES = (
    "relay_client.services",
    "relay_client.client",
)
# Relative spellings of the same modules, as seen from inside core/.
FORBIDDEN_RELATIVE = ("services", "client")


def is_forbidden(module: str, level: int = 0) -> bool:
    if level >= 2:
        return any(
            module == name or module.startswith(name + ".")
            for name in FORBIDDEN_RELATIVE
        )
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                mod = alias.name
                if is_forbidden(mod):
                    errors.append(f"{path}: forbidden import '{mod}'")
        elif isinstance(node, ast.ImportFrom):
            mod = node.module or ""
            if mod and is_forbidden(mod, node.level):
                errors.append(f"{path}: forbidden import '{'.' * node.level}{mod}'")
    return errors


def main() -> int:
    violations: list[str] = []
    for py_file in CORE_DIR.rglob("*.py"):
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
