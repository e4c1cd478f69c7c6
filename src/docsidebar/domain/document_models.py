from __future__ import annotations

"""
Document Discovery Data Models.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentRecord:
    """
    A discovered document that declares a title in its front-matter.

    Attributes:
        path: Root-relative route ('/guide/intro'), extension stripped.
        title: Extracted title, possibly containing '/' hierarchy delimiters.
    """
    path: str
    title: str
