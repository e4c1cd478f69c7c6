from __future__ import annotations

"""
Document Discovery Service.

Walks a documentation source tree depth-first and yields a DocumentRecord
for every document whose front-matter declares a title. Documents without
a title opt out of the navigation and are skipped silently.
"""

import logging
import os
from typing import Collection, Iterator, List, Optional

from docsidebar.core.analysis.frontmatter import extract_field_from_path
from docsidebar.domain.constants import DEFAULT_EXTENSION, DEFAULT_TITLE_FIELD
from docsidebar.domain.document_models import DocumentRecord
from docsidebar.infra.fs import to_route_path

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def iter_documents(
        root_dir: str,
        ignore: Optional[Collection[str]] = None,
        *,
        extension: str = DEFAULT_EXTENSION,
        field_name: str = DEFAULT_TITLE_FIELD,
        sort_entries: bool = False,
) -> Iterator[DocumentRecord]:
    """
    Traverse the source tree and yield titled documents in pre-order.

    Uses an explicit stack of directory listings instead of recursion, so
    nesting depth is not bound by the interpreter's call stack. Symbolic
    links are neither descended into nor read.

    Args:
        root_dir: Directory to scan.
        ignore: Bare directory names that are never descended into.
        extension: Document extension to consider (case-insensitive).
        field_name: Front-matter key holding the title.
        sort_entries: Sort each directory listing by name. When False the
                      order reported by the filesystem is kept.

    Yields:
        DocumentRecord: One record per titled document.

    Raises:
        OSError: If the root directory itself cannot be listed.
    """
    root_abs = os.path.abspath(root_dir)
    ignored = frozenset(ignore or ())
    ext_lower = extension.lower()

    # The root listing is fatal; nested listings are not
    stack: List[Iterator[os.DirEntry]] = [iter(_list_directory(root_abs, sort_entries))]

    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        if entry.is_dir(follow_symlinks=False):
            if entry.name in ignored:
                logger.debug(f"Ignoring directory: {entry.path}")
                continue
            try:
                children = _list_directory(entry.path, sort_entries)
            except OSError as e:
                logger.warning(f"Skipping unreadable directory '{entry.path}': {e}")
                continue
            stack.append(iter(children))
            continue

        if not entry.is_file(follow_symlinks=False):
            continue
        if not entry.name.lower().endswith(ext_lower):
            continue

        title = extract_field_from_path(entry.path, field_name)
        if title is None:
            logger.debug(f"No '{field_name}' in front-matter, skipping: {entry.path}")
            continue

        yield DocumentRecord(
            path=to_route_path(entry.path, root_abs, extension),
            title=title,
        )


def scan_documents(
        root_dir: str,
        ignore: Optional[Collection[str]] = None,
        *,
        extension: str = DEFAULT_EXTENSION,
        field_name: str = DEFAULT_TITLE_FIELD,
        sort_entries: bool = False,
) -> List[DocumentRecord]:
    """
    Collect every titled document below root_dir.

    See iter_documents for the traversal rules.

    Returns:
        List[DocumentRecord]: Records in depth-first, pre-order order.
    """
    records = list(iter_documents(
        root_dir,
        ignore,
        extension=extension,
        field_name=field_name,
        sort_entries=sort_entries,
    ))
    logger.debug(f"Discovered {len(records)} titled documents under {root_dir}")
    return records


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _list_directory(path: str, sort_entries: bool) -> List[os.DirEntry]:
    """Read a full directory listing, closing the handle immediately."""
    with os.scandir(path) as it:
        entries = list(it)
    if sort_entries:
        entries.sort(key=lambda e: e.name)
    return entries
