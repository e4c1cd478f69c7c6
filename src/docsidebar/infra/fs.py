from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Cross-platform path helpers used to turn filesystem locations into the
forward-slash routes that the host site expects.
"""

import os

from docsidebar.domain.constants import ROUTE_SEPARATOR

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def strip_suffix_casefold(name: str, suffix: str) -> str:
    """Remove a trailing suffix from a name, ignoring case."""
    if suffix and name.lower().endswith(suffix.lower()):
        return name[: len(name) - len(suffix)]
    return name


def to_route_path(file_path: str, root: str, extension: str) -> str:
    """
    Convert a file location into a root-relative site route.

    The relative path is normalised to forward slashes, prefixed with a
    single separator and stripped of its document extension.

    Args:
        file_path: Location of the document.
        root: Directory the route is relative to.
        extension: Document extension to remove (case-insensitive).

    Returns:
        str: Route such as '/guide/intro'.
    """
    rel_path = os.path.relpath(file_path, root)
    inner = rel_path.replace(os.sep, ROUTE_SEPARATOR).replace("\\", ROUTE_SEPARATOR)
    inner = strip_suffix_casefold(inner, extension)
    return f"{ROUTE_SEPARATOR}{inner}"
