from __future__ import annotations

"""
Domain Exceptions.

Fatal conditions surfaced to callers of the sidebar pipeline. Per-document
anomalies (unreadable files, missing titles) are never raised; they are
absorbed as skips by the scanner.
"""


class DocSidebarError(Exception):
    """Base class for all errors raised by docsidebar."""


class ConfigurationError(DocSidebarError):
    """
    Raised when a required setting is missing or unusable.

    Attributes:
        setting: Name of the offending configuration key.
    """

    def __init__(self, setting: str, message: str = "") -> None:
        self.setting = setting
        super().__init__(message or f"The '{setting}' option is required when using with_dynamic_sidebar.")
