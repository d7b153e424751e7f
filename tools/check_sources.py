#!/usr/bin/env python3
"""
Fail CI on source patterns the package does not allow.

Rules:
- bare-except: `except:` handlers (must be `except Exception as e:` or narrower)
- host-import: imports of Autodesk.* / RevitServices outside the files that
  own host access (see HOST_IMPORT_ALLOWED)

Optional whitelist file: lines of "relative/path.py:LINENO".
"""

from __future__ import annotations

import argparse
import ast
import os
import sys
from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple

DEFAULT_PATHS = ["sheet_viewports", "dynamo_thinloader.py"]

HOST_MODULE_ROOTS = ("Autodesk", "RevitServices")

HOST_IMPORT_ALLOWED = (
    "sheet_viewports/revit/api.py",
    "sheet_viewports/entry_dynamo.py",
)


@dataclass(frozen=True)
class Hit:
    path: str
    lineno: int
    rule: str
    detail: str


def _iter_py_files(target: str) -> Iterable[str]:
    if os.path.isfile(target):
        if target.endswith(".py"):
            yield target
        return

    for root, _, files in os.walk(target):
        for fn in files:
            if fn.endswith(".py"):
                yield os.path.join(root, fn)


def _load_whitelist(path: str | None) -> Set[Tuple[str, int]]:
    if not path or not os.path.exists(path):
        return set()

    allowed: Set[Tuple[str, int]] = set()
    with open(path, "r", encoding="utf-8") as f:
        for raw in f:
            s = raw.strip()
            if not s or s.startswith("#"):
                continue
            p, _, n = s.rpartition(":")
            if not p or not n.isdigit():
                raise SystemExit(f"Invalid whitelist line (expected path:lineno): {s}")
            allowed.add((p.replace("\\", "/"), int(n)))
    return allowed


def _rel(path: str, root: str) -> str:
    return os.path.relpath(path, root).replace("\\", "/")


def _is_host_module(name: str | None) -> bool:
    return bool(name) and name.split(".")[0] in HOST_MODULE_ROOTS


def check_source(src: str, rel_path: str) -> List[Hit]:
    """Return rule violations in one source file."""
    hits: List[Hit] = []
    tree = ast.parse(src, filename=rel_path)
    host_allowed = rel_path in HOST_IMPORT_ALLOWED

    for node in ast.walk(tree):
        if isinstance(node, ast.ExceptHandler) and node.type is None:
            hits.append(Hit(rel_path, node.lineno, "bare-except", "except:"))
        elif isinstance(node, ast.Import) and not host_allowed:
            for alias in node.names:
                if _is_host_module(alias.name):
                    hits.append(Hit(rel_path, node.lineno, "host-import", alias.name))
        elif isinstance(node, ast.ImportFrom) and not host_allowed:
            if node.level == 0 and _is_host_module(node.module):
                hits.append(Hit(rel_path, node.lineno, "host-import", node.module))

    return hits


def scan(paths: List[str], whitelist: Set[Tuple[str, int]], root: str | None = None) -> List[Hit]:
    root = root or os.getcwd()
    files: Set[str] = set()
    for p in paths:
        full = p if os.path.isabs(p) else os.path.join(root, p)
        if not os.path.exists(full):
            raise SystemExit(f"Path not found: {p}")
        files.update(_iter_py_files(full))

    hits: List[Hit] = []
    for path in sorted(files):
        rel = _rel(path, root)
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            src = f.read()
        for h in check_source(src, rel):
            if (h.path, h.lineno) not in whitelist:
                hits.append(h)
    return hits


def main(argv: List[str]) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--paths", nargs="+", default=DEFAULT_PATHS, help="Files/dirs to scan")
    ap.add_argument("--whitelist", default=None, help="Optional whitelist file path")
    args = ap.parse_args(argv)

    hits = scan(args.paths, _load_whitelist(args.whitelist))

    if hits:
        print("ERROR: disallowed source patterns detected:")
        for h in hits:
            print(f"  {h.path}:{h.lineno}: [{h.rule}] {h.detail}")
        return 2

    print("OK: no disallowed source patterns found in scanned paths.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
