from __future__ import annotations

"""
Front-Matter Metadata Extractor.

Reads the leading '---' delimited metadata block of a document and returns
the value of a single field. Parsing is deliberately lenient: anything that
does not look like a well-formed block or field simply yields None, so that
partially written documents stay out of the navigation instead of breaking
the build.
"""

import logging
import re
from typing import Optional

from docsidebar.domain.constants import DEFAULT_TITLE_FIELD, FRONTMATTER_DELIMITER

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# REGEX CONSTANTS
# -----------------------------------------------------------------------------

_BLOCK_RX: re.Pattern = re.compile(
    r"\A" + re.escape(FRONTMATTER_DELIMITER) + r"\r?\n(.*?)\r?\n"
    + re.escape(FRONTMATTER_DELIMITER) + r"(?:\r?\n|\Z)",
    re.DOTALL,
)

_QUOTE_CHARS = ("\"", "'")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_field(raw_text: str, field_name: str = DEFAULT_TITLE_FIELD) -> Optional[str]:
    """
    Extract a field value from the front-matter block of a document.

    The block must start at the very first character of the text. Within
    the block the first 'field: value' line wins.

    Args:
        raw_text: Full document content.
        field_name: Key to look up inside the block.

    Returns:
        Optional[str]: Trimmed, unquoted value, or None if the block or the
                       field is missing or the value is empty.
    """
    block = _BLOCK_RX.match(raw_text)
    if not block:
        return None

    field_rx = _field_pattern(field_name)
    match = field_rx.search(block.group(1))
    if not match:
        return None

    value = _strip_quotes(match.group(1).strip())
    return value or None


def extract_field_from_path(file_path: str, field_name: str = DEFAULT_TITLE_FIELD) -> Optional[str]:
    """
    Read a document from disk and extract a front-matter field.

    Unreadable or undecodable files are treated exactly like documents
    without the field.

    Args:
        file_path: Location of the document.
        field_name: Key to look up inside the block.

    Returns:
        Optional[str]: The field value, or None.
    """
    try:
        with open(file_path, "r", encoding="utf-8-sig") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Skipping unreadable document '{file_path}': {e}")
        return None

    return extract_field(content, field_name)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _field_pattern(field_name: str) -> re.Pattern:
    """Build the line matcher for 'field_name: value'."""
    return re.compile(r"^[ \t]*" + re.escape(field_name) + r":[ \t]*(.+?)[ \t\r]*$", re.MULTILINE)


def _strip_quotes(value: str) -> str:
    """Remove one matching pair of surrounding quote characters."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTE_CHARS:
        return value[1:-1]
    return value
