#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Create / refresh the fixture tree used by the codeflat
test-suite.

Usage: build_fixtures.py [TARGET_DIR]   (default: <repo>/test-fixtures)

Idempotent and 100 % Python.
"""
from __future__ import annotations

import shutil
import sys
from pathlib import Path

DEFAULT_ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()

# NUL bytes in the first 512 bytes → sniffed as binary.
BINARY_BLOB = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR" + bytes(range(256))


# ────────────────────────── helpers ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(body.encode("utf-8"))


def _write_bytes(path: Path, body: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(body)


# ───────────────────── ignore rules ─────────────────────
def _populate_ignores(root: Path) -> None:
    _write(root / ".gitignore", "# root rules\nb.txt\nbuild/\n*.log\n!keep.log\n!.git/\n")
    _write(root / "src/.gitignore", "!b.txt\ngenerated/\n")


# ───────────────────── source files ─────────────────────
def _populate_sources(root: Path) -> None:
    _write(root / "a.txt", "hello")
    _write(root / "b.txt", "secret")
    _write(root / "app.log", "log line\n")
    _write(root / "keep.log", "kept log\n")
    _write(root / ".env.sample", "KEY=value\n")
    _write(root / "crlf.txt", "one\r\ntwo\r\n")
    _write(root / "build/out.txt", "built artefact\n")
    _write(root / "docs/build", "a file named build\n")
    _write(root / "src/main.py", "print('hi')\n")
    _write(root / "src/b.txt", "re-included\n")
    _write(root / "src/generated/gen.py", "GENERATED = True\n")
    _write_bytes(root / "image.bin", BINARY_BLOB)


# ───────────────────── VCS metadata ─────────────────────
def _populate_vcs(root: Path) -> None:
    _write(root / ".git/HEAD", "ref: refs/heads/main\n")
    _write(root / ".git/config", "[core]\n")
    _write(root / "sub/.git/HEAD", "ref: refs/heads/main\n")
    _write(root / "sub/readme.md", "# sub\n")


def build(root: Path = DEFAULT_ROOT) -> Path:
    if root.exists():
        shutil.rmtree(root)
    root.mkdir(parents=True)
    _populate_ignores(root)
    _populate_sources(root)
    _populate_vcs(root)
    return root


if __name__ == "__main__":
    target = Path(sys.argv[1]).resolve() if len(sys.argv) > 1 else DEFAULT_ROOT
    build(target)
