from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into host option overrides and scan settings.
"""

import argparse
from typing import Any, Dict, List, Optional

from docsidebar.domain.constants import (
    DEFAULT_EXTENSION,
    DEFAULT_TITLE_FIELD,
    KEY_IGNORE,
    KEY_SRC_DIR,
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the docsidebar CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="docsidebar",
        description="Generate a documentation sidebar from Markdown front-matter titles.",
    )

    # --- Configuration Sources ---
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help="JSON host configuration to augment.",
    )
    p.add_argument(
        "-s", "--src-dir",
        dest="src_dir",
        default=None,
        help="Documentation source directory (overrides 'srcDir').",
    )
    p.add_argument(
        "--ignore",
        dest="ignore",
        default=None,
        help="Comma-separated directory names to skip (overrides 'ignore').",
    )

    # --- Discovery Settings ---
    p.add_argument(
        "--ext",
        dest="extension",
        default=DEFAULT_EXTENSION,
        help=f"Document extension to scan (default: {DEFAULT_EXTENSION}).",
    )
    p.add_argument(
        "--field",
        dest="field_name",
        default=DEFAULT_TITLE_FIELD,
        help=f"Front-matter key holding the title (default: {DEFAULT_TITLE_FIELD}).",
    )
    p.add_argument(
        "--sort",
        dest="sort_entries",
        action="store_true",
        help="Sort directory entries by name instead of filesystem order.",
    )

    # --- Output ---
    p.add_argument(
        "--sidebar-only",
        action="store_true",
        help="Print only the sidebar list instead of the full configuration.",
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print an ASCII preview of the sidebar instead of JSON.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Write JSON output to FILE instead of stdout.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log records to FILE (rotated at 1MB).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into host option overrides.

    Only options given on the command line appear in the result.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Host option overrides.
    """
    overrides: Dict[str, Any] = {}

    if args.src_dir:
        overrides[KEY_SRC_DIR] = args.src_dir
    if args.ignore is not None:
        overrides[KEY_IGNORE] = _split_csv(args.ignore)

    return overrides


def args_to_scan_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """Extract the keyword arguments forwarded to the scanner."""
    extension = args.extension.strip() or DEFAULT_EXTENSION
    if not extension.startswith("."):
        extension = "." + extension
    return {
        "extension": extension,
        "field_name": args.field_name.strip() or DEFAULT_TITLE_FIELD,
        "sort_entries": bool(args.sort_entries),
    }

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> List[str]:
    """Convert a comma-separated string into a list of sanitized strings."""
    if value is None:
        return []
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
