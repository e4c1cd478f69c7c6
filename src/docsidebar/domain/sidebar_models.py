from __future__ import annotations

"""
Sidebar Tree Data Models.

Defines the two node variants of the navigation tree. A node is either a
group (named container of child nodes) or a link (named leaf pointing at a
document route), never both.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple, Union

from docsidebar.domain.constants import DEFAULT_GROUP_COLLAPSED

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SidebarLink:
    """
    Leaf entry of the sidebar.

    Attributes:
        text: Display name.
        link: Route of the document ('/a/b/c').
    """
    text: str
    link: str

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "link": self.link}


@dataclass(frozen=True)
class SidebarGroup:
    """
    Named group of sidebar entries.

    Attributes:
        text: Display name.
        items: Ordered children, in first-seen order.
        collapsed: Rendering hint for the host theme.
    """
    text: str
    items: Tuple["SidebarNode", ...] = field(default_factory=tuple)
    collapsed: bool = DEFAULT_GROUP_COLLAPSED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "collapsed": self.collapsed,
            "items": sidebar_to_dicts(self.items),
        }


SidebarNode = Union[SidebarGroup, SidebarLink]

# -----------------------------------------------------------------------------
# SERIALIZATION
# -----------------------------------------------------------------------------

def sidebar_to_dicts(nodes: Iterable[SidebarNode]) -> List[Dict[str, Any]]:
    """Convert a sequence of nodes into the host's JSON-compatible shape."""
    return [node.to_dict() for node in nodes]
