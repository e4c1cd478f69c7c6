from __future__ import annotations

"""
Sidebar Tree Builder.

Folds an ordered list of DocumentRecords into a nested navigation tree.
Titles are split on the hierarchy delimiter ('Guide/Setup/Install'); every
segment but the last names a group, the last names the link. Groups that
share a prefix are reused, and all children keep first-seen order.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from docsidebar.domain.constants import DEFAULT_GROUP_COLLAPSED, HIERARCHY_DELIMITER
from docsidebar.domain.document_models import DocumentRecord
from docsidebar.domain.sidebar_models import SidebarGroup, SidebarLink, SidebarNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_sidebar(
        records: Iterable[DocumentRecord],
        delimiter: str = HIERARCHY_DELIMITER,
) -> List[SidebarNode]:
    """
    Build the navigation tree from discovered documents.

    Args:
        records: Documents in scan order.
        delimiter: Separator between hierarchy levels inside a title.

    Returns:
        List[SidebarNode]: Children of the implicit root group.
    """
    root = _GroupDraft(text="")

    for record in records:
        parts = split_title(record.title, delimiter)
        if not parts:
            logger.debug(f"Title of '{record.path}' has no usable segments, skipping.")
            continue

        *group_parts, label = parts

        current = root
        for part in group_parts:
            found = current.find_group(part)
            if found is None:
                found = _GroupDraft(text=part)
                current.items.append(found)
            current = found

        current.items.append(SidebarLink(text=label, link=record.path))

    return [_freeze(item) for item in root.items]


def split_title(title: str, delimiter: str = HIERARCHY_DELIMITER) -> List[str]:
    """Split a title into trimmed, non-empty hierarchy segments."""
    return [p.strip() for p in title.split(delimiter) if p.strip()]

# -----------------------------------------------------------------------------
# INTERNAL DRAFT TREE
# -----------------------------------------------------------------------------

@dataclass
class _GroupDraft:
    """Mutable group used while folding; frozen into SidebarGroup at the end."""
    text: str
    items: List[Union["_GroupDraft", SidebarLink]] = field(default_factory=list)
    collapsed: bool = DEFAULT_GROUP_COLLAPSED

    def find_group(self, text: str) -> Optional["_GroupDraft"]:
        # Links never match, even with the same text
        for item in self.items:
            if isinstance(item, _GroupDraft) and item.text == text:
                return item
        return None


def _freeze(item: Union[_GroupDraft, SidebarLink]) -> SidebarNode:
    """Convert a draft subtree into immutable sidebar nodes."""
    if isinstance(item, SidebarLink):
        return item
    return SidebarGroup(
        text=item.text,
        items=tuple(_freeze(child) for child in item.items),
        collapsed=item.collapsed,
    )
