from __future__ import annotations

"""
Host Option Validation Service.

Gatekeeper in front of the sidebar pipeline. Checks that the required
source directory is present and coerces the ignore list into a clean list
of directory names. No filesystem access happens here.
"""

import logging
import os
from typing import Any, Dict, List, Mapping, Tuple

from docsidebar.domain.constants import KEY_IGNORE, KEY_SRC_DIR
from docsidebar.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_options(
        options: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize host options before the pipeline runs.

    Args:
        options: Raw host configuration mapping.
        strict: If True, raise TypeError on malformed 'ignore' values instead
                of coercing them.

    Returns:
        Tuple[Dict[str, Any], List[str]]: A shallow copy of the options with
                                          a normalized 'ignore' list, and a
                                          list of warnings.

    Raises:
        ConfigurationError: If options is not a mapping or 'srcDir' is
                            missing or empty.
    """
    warnings: List[str] = []

    if options is None:
        raise ConfigurationError(KEY_SRC_DIR)
    if not isinstance(options, Mapping):
        raise ConfigurationError(
            KEY_SRC_DIR,
            f"Invalid options type: expected a mapping, received {type(options).__name__}.",
        )

    merged: Dict[str, Any] = dict(options)

    src_dir = merged.get(KEY_SRC_DIR)
    if isinstance(src_dir, os.PathLike):
        src_dir = os.fspath(src_dir)
        merged[KEY_SRC_DIR] = src_dir
    if src_dir is None or (isinstance(src_dir, str) and not src_dir.strip()):
        raise ConfigurationError(KEY_SRC_DIR)
    if not isinstance(src_dir, str):
        raise ConfigurationError(
            KEY_SRC_DIR,
            f"Invalid field '{KEY_SRC_DIR}': expected str, received {type(src_dir).__name__}.",
        )

    merged[KEY_IGNORE] = _as_list_str(merged.get(KEY_IGNORE), KEY_IGNORE, warnings, strict)

    for w in warnings:
        logger.debug(f"Option coercion: {w}")

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_list_str(value: Any, field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return []

    # Support CSV string to list conversion for CLI compatibility
    if isinstance(value, str):
        if strict:
            raise TypeError(f"Invalid field '{field}': expected list[str], received str.")
        items = [x.strip() for x in value.split(",") if x.strip()]
        if items:
            warnings.append(f"Field '{field}' converted from CSV string to list.")
        return items

    if isinstance(value, (list, tuple, set, frozenset)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                # Directory names match exactly, surrounding spaces included
                if item:
                    out.append(item)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using an empty list.")
    return []
