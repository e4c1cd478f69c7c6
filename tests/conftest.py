from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures that build documentation trees on disk.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
def _titled(title: str, body: str = "Body text.\n") -> str:
    """Return Markdown content with a front-matter title."""
    return f"---\ntitle: {title}\n---\n\n{body}"


@pytest.fixture
def make_docs(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """
    Return a factory that writes {relative_path: content} under tmp_path/docs.

    Returns:
        Callable: Factory returning the docs root.
    """
    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / "docs"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def docs_site(make_docs: Callable[[Dict[str, str]], Path]) -> Path:
    """
    A small documentation tree.

    Structure:
    /docs
      index.md                 (no front-matter)
      /guide
        intro.md               Guide/Introduction
      /modules
        /core
          example.md           "Modules/Example"
      /node_modules
        pkg.md                 Vendor/Package
      notes.txt                Not a document
    """
    return make_docs({
        "index.md": "# Home\n",
        "guide/intro.md": _titled("Guide/Introduction"),
        "modules/core/example.md": _titled("\"Modules/Example\""),
        "node_modules/pkg.md": _titled("Vendor/Package"),
        "notes.txt": _titled("Notes"),
    })
