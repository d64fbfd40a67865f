"""Tool identity shown in console banners and report headers/footers."""

from __future__ import annotations

TOOL_NAME = "Directory Listing Script"
TOOL_VERSION = "1.0"
TOOL_AUTHOR = "JxH"
TOOL_EMAIL = "v7_@hotmail.com"
TOOL_DATE = "2025-06-29"
TOOL_LICENSE = "MIT"


def tool_title() -> str:
    """Return ``"<name> v<version>"``."""
    return f"{TOOL_NAME} v{TOOL_VERSION}"
