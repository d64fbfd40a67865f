"""Error taxonomy for target validation.

Domain code raises these; only ``treelister.cli`` turns them into exit codes.
Unknown command-line options are warnings, not errors.
"""

from __future__ import annotations


class TreeListerError(Exception):
    """Base class for fatal treelister errors."""


class MissingArgumentError(TreeListerError):
    """No target directory was supplied."""


class NotFoundError(TreeListerError):
    """Target path does not exist or is not a directory."""


class DirectoryPermissionError(TreeListerError, PermissionError):
    """Target directory exists but cannot be read."""


__all__ = [
    "TreeListerError",
    "MissingArgumentError",
    "NotFoundError",
    "DirectoryPermissionError",
]
