from __future__ import annotations

"""
Domain Constants.

Shared literals for document discovery, title parsing and the host
configuration schema.
"""

from typing import Final

# -----------------------------------------------------------------------------
# DOCUMENT DISCOVERY
# -----------------------------------------------------------------------------

DEFAULT_EXTENSION: Final[str] = ".md"
DEFAULT_TITLE_FIELD: Final[str] = "title"
FRONTMATTER_DELIMITER: Final[str] = "---"

# -----------------------------------------------------------------------------
# SIDEBAR CONSTRUCTION
# -----------------------------------------------------------------------------

HIERARCHY_DELIMITER: Final[str] = "/"
ROUTE_SEPARATOR: Final[str] = "/"
DEFAULT_GROUP_COLLAPSED: Final[bool] = True

# -----------------------------------------------------------------------------
# HOST CONFIGURATION KEYS
# -----------------------------------------------------------------------------

KEY_SRC_DIR: Final[str] = "srcDir"
KEY_IGNORE: Final[str] = "ignore"
KEY_THEME_CONFIG: Final[str] = "themeConfig"
KEY_SIDEBAR: Final[str] = "sidebar"
KEY_OUTLINE: Final[str] = "outline"
KEY_VITE: Final[str] = "vite"

OUTLINE_MODE: Final[str] = "deep"
