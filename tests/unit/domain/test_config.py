from __future__ import annotations

"""
Unit tests for host configuration loading.
"""

import json
from pathlib import Path

import pytest

from docsidebar.domain.config import get_default_options, load_options
from docsidebar.domain.errors import ConfigurationError


def test_default_options():
    defaults = get_default_options()
    assert defaults == {"srcDir": None, "ignore": []}


def test_defaults_are_fresh_copies():
    first = get_default_options()
    first["ignore"].append("dist")
    assert get_default_options()["ignore"] == []


def test_load_options_reads_json_object(tmp_path: Path):
    cfg = tmp_path / "site.json"
    cfg.write_text(json.dumps({"srcDir": "docs", "title": "Site"}), encoding="utf-8")

    assert load_options(str(cfg)) == {"srcDir": "docs", "title": "Site"}


def test_load_options_missing_file(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="Cannot read"):
        load_options(str(tmp_path / "missing.json"))


def test_load_options_invalid_json(tmp_path: Path):
    cfg = tmp_path / "broken.json"
    cfg.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not valid JSON"):
        load_options(str(cfg))


def test_load_options_requires_object(tmp_path: Path):
    cfg = tmp_path / "list.json"
    cfg.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="JSON object"):
        load_options(str(cfg))
