from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to host option overrides.
2. CSV string parsing logic.
3. Scan settings normalization.
"""

from docsidebar.interface.cli.args import args_to_overrides, args_to_scan_settings, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_no_flags_produce_no_overrides():
    args = parse_args([])
    assert args_to_overrides(args) == {}


def test_src_dir_and_ignore_overrides():
    args = parse_args(["-s", "docs", "--ignore", "node_modules, dist,,"])

    overrides = args_to_overrides(args)

    assert overrides == {"srcDir": "docs", "ignore": ["node_modules", "dist"]}


def test_empty_ignore_clears_list():
    args = parse_args(["--ignore", ""])
    assert args_to_overrides(args)["ignore"] == []


def test_default_scan_settings():
    settings = args_to_scan_settings(parse_args([]))
    assert settings == {"extension": ".md", "field_name": "title", "sort_entries": False}


def test_scan_settings_normalize_extension():
    settings = args_to_scan_settings(parse_args(["--ext", "mdx", "--field", "nav", "--sort"]))
    assert settings == {"extension": ".mdx", "field_name": "nav", "sort_entries": True}


def test_output_flags():
    args = parse_args(["--sidebar-only", "--print-tree", "-o", "out.json", "--debug", "-c", "site.json", "--log-file", "run.log"])

    assert args.sidebar_only is True
    assert args.print_tree is True
    assert args.output_path == "out.json"
    assert args.debug is True
    assert args.config_path == "site.json"
    assert args.log_file == "run.log"


def test_log_file_defaults_to_none():
    assert parse_args([]).log_file is None
