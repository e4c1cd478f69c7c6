from __future__ import annotations

"""
Sidebar Renderer.

Converts the sidebar tree into a visual ASCII representation for terminal
previews. Order is kept exactly as built; nothing is re-sorted.
"""

from typing import List, Sequence

from docsidebar.domain.sidebar_models import SidebarGroup, SidebarLink, SidebarNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_sidebar(nodes: Sequence[SidebarNode]) -> List[str]:
    """
    Render a sidebar tree into a list of lines.

    Args:
        nodes: Top-level sidebar nodes.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = []
    render_sidebar_structure(nodes, lines)
    return lines


def render_sidebar_structure(
        nodes: Sequence[SidebarNode],
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Recursively append the rendered nodes to an accumulator.

    Uses standard ASCII connectors (├──, └──). Groups are shown with a
    trailing slash, links with their route.

    Args:
        nodes: Nodes at the current level.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    total = len(nodes)

    for i, node in enumerate(nodes):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if isinstance(node, SidebarGroup):
            lines.append(f"{prefix}{connector}{node.text}/")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_sidebar_structure(node.items, lines, prefix=new_prefix)
            continue

        if isinstance(node, SidebarLink):
            lines.append(f"{prefix}{connector}{node.text} -> {node.link}")
