from __future__ import annotations

"""
Resource Listing Data Models.

Defines the entries produced by a single-level listing and the two closed
shapes a resolved locator can take.
"""

from dataclasses import dataclass, field
from typing import Union

from resutil.domain.constants import PATH_SEPARATOR
from resutil.domain.errors import InvalidArgumentError
from resutil.utils.validation import assert_nonempty_string

# Logical, "/"-separated path relative to a code unit's root
LogicalPath = str

# -----------------------------------------------------------------------------
# LISTING ENTRIES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Entry:
    """
    One direct child discovered at a logical path.

    Attributes:
        name: Child name, never empty and never containing a separator.
        parent_path: Logical path that was listed. Kept for diagnostics only,
                     it takes no part in equality or hashing.
        is_file: False when the child can itself be listed.
    """
    name: str
    parent_path: LogicalPath = field(compare=False)
    is_file: bool

    def __post_init__(self) -> None:
        assert_nonempty_string(self.name, "name")
        if PATH_SEPARATOR in self.name:
            raise InvalidArgumentError(f"Entry name '{self.name}' must not contain '{PATH_SEPARATOR}'")

    @property
    def path(self) -> LogicalPath:
        """Logical path of the child itself."""
        return join_logical(self.parent_path, self.name)

# -----------------------------------------------------------------------------
# RESOLVED LOCATORS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PlainDirectory:
    """
    Locator for a path reachable through ordinary filesystem operations.

    Attributes:
        system_path: Absolute filesystem path.
    """
    system_path: str


@dataclass(frozen=True)
class ArchiveScope:
    """
    Locator for an entry prefix inside a zip-structured container.

    The archive is not opened here; the enumerator opens and closes it
    within a single listing call.

    Attributes:
        archive_path: Absolute filesystem path to the archive.
        entry_prefix: Internal prefix (no trailing separator) to list under.
    """
    archive_path: str
    entry_prefix: str


ResolvedLocator = Union[PlainDirectory, ArchiveScope]

# -----------------------------------------------------------------------------
# PATH HELPERS
# -----------------------------------------------------------------------------

def join_logical(parent: LogicalPath, name: str) -> LogicalPath:
    """Append a child name to a logical path without doubling separators."""
    if not parent:
        return name
    return parent.rstrip(PATH_SEPARATOR) + PATH_SEPARATOR + name
