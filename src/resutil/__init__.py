from __future__ import annotations

"""
resutil: archive-transparent resource listing for Python packages.

Lists the files shipped inside a package identically whether the package
was imported from a directory or from a zip archive on sys.path, plus a
handful of small formatting, collection and version helpers.
"""

__version__ = "0.1.0"

from resutil.core.resources.enumerator import (
    get_all_files_in_resource,
    get_resource_listing,
    list_children,
)
from resutil.core.resources.locator import resolve
from resutil.core.resources.reader import get_resource_bytes, get_resource_file_content
from resutil.core.versioning import find_version, version_of
from resutil.domain.errors import (
    DuplicateKeyError,
    InvalidArgumentError,
    MalformedLocationError,
    ResourceError,
    ResourceNotFoundError,
    UnsupportedSchemeError,
)
from resutil.domain.resource_models import ArchiveScope, Entry, PlainDirectory, ResolvedLocator
from resutil.domain.version import Version

__all__ = [
    "ArchiveScope",
    "DuplicateKeyError",
    "Entry",
    "InvalidArgumentError",
    "MalformedLocationError",
    "PlainDirectory",
    "ResolvedLocator",
    "ResourceError",
    "ResourceNotFoundError",
    "UnsupportedSchemeError",
    "Version",
    "find_version",
    "get_all_files_in_resource",
    "get_resource_bytes",
    "get_resource_file_content",
    "get_resource_listing",
    "list_children",
    "resolve",
    "version_of",
]
