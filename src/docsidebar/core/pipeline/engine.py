from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the sidebar workflow:
1. Validates the host options (before touching the filesystem).
2. Scans the source directory for titled documents.
3. Builds the navigation tree.
4. Merges the tree into a copy of the host configuration.
"""

import logging
from typing import Any, Collection, Dict, List, Mapping, Optional

from docsidebar.core.analysis.sidebar_builder import build_sidebar
from docsidebar.core.pipeline.validator import validate_options
from docsidebar.core.services.scanner import scan_documents
from docsidebar.domain.constants import (
    DEFAULT_EXTENSION,
    DEFAULT_TITLE_FIELD,
    KEY_IGNORE,
    KEY_OUTLINE,
    KEY_SIDEBAR,
    KEY_SRC_DIR,
    KEY_THEME_CONFIG,
    KEY_VITE,
    OUTLINE_MODE,
)
from docsidebar.domain.sidebar_models import SidebarNode, sidebar_to_dicts

logger = logging.getLogger(__name__)


def generate_sidebar(
        src_dir: str,
        ignore: Optional[Collection[str]] = None,
        *,
        extension: str = DEFAULT_EXTENSION,
        field_name: str = DEFAULT_TITLE_FIELD,
        sort_entries: bool = False,
) -> List[SidebarNode]:
    """
    Scan a source directory and build its sidebar tree.

    Args:
        src_dir: Documentation source directory.
        ignore: Directory names to skip wherever they occur.
        extension: Document extension.
        field_name: Front-matter key holding the title.
        sort_entries: Sort directory listings by name during the scan.

    Returns:
        List[SidebarNode]: Top-level sidebar nodes.

    Raises:
        OSError: If src_dir cannot be listed.
    """
    records = scan_documents(
        src_dir,
        ignore,
        extension=extension,
        field_name=field_name,
        sort_entries=sort_entries,
    )
    sidebar = build_sidebar(records)
    logger.info(f"Sidebar built from {len(records)} documents ({len(sidebar)} top-level entries).")
    return sidebar


def with_dynamic_sidebar(
        options: Optional[Mapping[str, Any]],
        *,
        extension: str = DEFAULT_EXTENSION,
        field_name: str = DEFAULT_TITLE_FIELD,
        sort_entries: bool = False,
) -> Dict[str, Any]:
    """
    Augment a host configuration with a generated sidebar.

    The returned mapping is the caller's configuration without 'ignore',
    with 'themeConfig.sidebar' set to the generated tree, 'themeConfig.outline'
    forced to 'deep', and the source directory added to
    'vite.server.fs.allow'. The input mapping is not modified.

    Args:
        options: Host configuration. Must contain 'srcDir'; 'ignore' is an
                 optional list of directory names.
        extension: Document extension.
        field_name: Front-matter key holding the title.
        sort_entries: Sort directory listings by name during the scan.

    Returns:
        Dict[str, Any]: The augmented configuration.

    Raises:
        ConfigurationError: If 'srcDir' is missing (raised before any I/O).
        OSError: If the source directory cannot be listed.
    """
    # 1) Option validation
    clean, warnings = validate_options(options, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    ignore = clean.pop(KEY_IGNORE)
    src_dir = clean[KEY_SRC_DIR]
    logger.info(f"Generating sidebar for: {src_dir}")

    # 2) Scan and build
    sidebar = generate_sidebar(
        src_dir,
        ignore,
        extension=extension,
        field_name=field_name,
        sort_entries=sort_entries,
    )

    # 3) Merge into host configuration
    theme_config = dict(clean.get(KEY_THEME_CONFIG) or {})
    theme_config[KEY_SIDEBAR] = sidebar_to_dicts(sidebar)
    theme_config[KEY_OUTLINE] = OUTLINE_MODE

    clean[KEY_THEME_CONFIG] = theme_config
    clean[KEY_VITE] = _widen_fs_allow(clean.get(KEY_VITE), src_dir)
    return clean


def _widen_fs_allow(vite: Optional[Mapping[str, Any]], src_dir: str) -> Dict[str, Any]:
    """Copy the vite section and append src_dir to server.fs.allow once."""
    vite_out = dict(vite or {})
    server = dict(vite_out.get("server") or {})
    fs = dict(server.get("fs") or {})

    allow = list(fs.get("allow") or [])
    if src_dir not in allow:
        allow.append(src_dir)

    fs["allow"] = allow
    server["fs"] = fs
    vite_out["server"] = server
    return vite_out
