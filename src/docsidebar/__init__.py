from __future__ import annotations

"""
docsidebar: build a documentation sidebar from Markdown front-matter titles.
"""

from docsidebar.core.pipeline.engine import generate_sidebar, with_dynamic_sidebar
from docsidebar.domain.errors import ConfigurationError, DocSidebarError
from docsidebar.domain.sidebar_models import SidebarGroup, SidebarLink, SidebarNode

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DocSidebarError",
    "SidebarGroup",
    "SidebarLink",
    "SidebarNode",
    "generate_sidebar",
    "with_dynamic_sidebar",
]
