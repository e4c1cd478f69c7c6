from __future__ import annotations

"""
Unit tests for route construction helpers.
"""

import os

from docsidebar.infra.fs import strip_suffix_casefold, to_route_path


def test_strip_suffix_casefold():
    assert strip_suffix_casefold("Page.MD", ".md") == "Page"
    assert strip_suffix_casefold("page.md.bak", ".md") == "page.md.bak"
    assert strip_suffix_casefold("page", "") == "page"


def test_to_route_path_nested():
    root = os.path.join("srv", "docs")
    file_path = os.path.join(root, "guide", "setup", "install.md")
    assert to_route_path(file_path, root, ".md") == "/guide/setup/install"


def test_to_route_path_top_level():
    root = os.path.join("srv", "docs")
    assert to_route_path(os.path.join(root, "index.md"), root, ".md") == "/index"


def test_to_route_path_only_strips_trailing_extension():
    root = os.path.join("srv", "docs")
    file_path = os.path.join(root, "notes.md.d", "a.md")
    assert to_route_path(file_path, root, ".md") == "/notes.md.d/a"
