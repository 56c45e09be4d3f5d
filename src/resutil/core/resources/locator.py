from __future__ import annotations

"""
Resource Locator Resolution.

Determines which kind of storage backs a logical path under a code unit:
a plain directory reachable through ordinary path operations, or an entry
prefix inside a zip-structured archive that can only be scanned entry by
entry.

A code unit's root is frequently not addressable on its own inside an
archive (only concrete entries are), so resolution falls back to the unit's
own resource name to discover which container it lives in before opening
that container directly.
"""

import logging
from typing import Any, Optional, Tuple

from resutil.core.resources.loader import CodeUnitLoader, ResourceLoader
from resutil.domain.constants import (
    ARCHIVE_SCHEME,
    ARCHIVE_SEPARATOR,
    FILE_SCHEME,
    FILE_URL_PREFIX,
    PATH_SEPARATOR,
)
from resutil.domain.errors import (
    MalformedLocationError,
    ResourceNotFoundError,
    UnsupportedSchemeError,
)
from resutil.domain.resource_models import ArchiveScope, PlainDirectory, ResolvedLocator
from resutil.infra.fs import decode_component, file_url_path_to_system_path, url_scheme, url_to_path
from resutil.utils.validation import assert_nonnull

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve(
        code_unit: Any,
        path: str,
        loader: Optional[ResourceLoader] = None,
) -> ResolvedLocator:
    """
    Resolve a logical path under a code unit into a concrete locator.

    Args:
        code_unit: Module, module name or object identifying the code unit.
                   Ignored when an explicit loader is supplied.
        path: Logical '/'-separated path relative to the unit's import root.
        loader: Optional loading context overriding the import system.

    Returns:
        ResolvedLocator: PlainDirectory or ArchiveScope.

    Raises:
        ResourceNotFoundError: If the path does not exist under the unit, or the
                               unit itself cannot be located.
        UnsupportedSchemeError: If the location is neither plain nor archived.
        MalformedLocationError: If an archive location lacks its separator marker.
    """
    assert_nonnull(path, "path")
    if loader is None:
        loader = CodeUnitLoader.for_code_unit(code_unit)
    path = path.strip(PATH_SEPARATOR)

    # 1. Direct lookup of the requested path
    requested = path
    location = loader.get_resource(path)

    # 2. Plain directories can be used as found
    if location is not None and url_scheme(location) == FILE_SCHEME:
        logger.debug(f"Resolved '{path}' in '{loader.name}' to plain location {location}")
        return PlainDirectory(system_path=url_to_path(location))

    # 3. Triangulate the container through the unit's own resource
    if location is None:
        requested = loader.type_resource_name()
        location = loader.get_resource(requested)
        logger.debug(
            f"Path '{path}' not addressable in '{loader.name}'; "
            f"container discovered via '{requested}': {location}"
        )

    # 4. Nothing belongs to this unit at all
    if location is None:
        raise ResourceNotFoundError(path, loader.name)

    scheme = url_scheme(location)

    # 5. A plain container answers every existing path directly, so the
    #    path is missing (the found location may be the unit's own directory)
    if scheme == FILE_SCHEME:
        raise ResourceNotFoundError(path, loader.name)

    # 6. Archive container
    if scheme == ARCHIVE_SCHEME:
        archive_path, entry = parse_archive_location(location)
        root_prefix = _root_prefix(entry, requested)
        entry_prefix = _join(root_prefix, path)
        logger.debug(f"Resolved '{path}' in '{loader.name}' to archive '{archive_path}' [{entry_prefix}]")
        return ArchiveScope(archive_path=archive_path, entry_prefix=entry_prefix)

    # 7. Anything else is not understood
    raise UnsupportedSchemeError(scheme, location)


def parse_archive_location(location: str) -> Tuple[str, str]:
    """
    Split an archive location into the archive's system path and the entry name.

    The archive path is the text between the fixed 'zip:file://' prefix and
    the first separator marker, percent-decoded.

    Args:
        location: URL of the form 'zip:file:///abs/archive.zip!/entry/name'.

    Returns:
        Tuple[str, str]: (absolute archive path, decoded entry name).

    Raises:
        MalformedLocationError: If the marker or the file prefix is missing.
    """
    scheme_prefix = ARCHIVE_SCHEME + ":" + FILE_URL_PREFIX
    if not location.lower().startswith(scheme_prefix):
        raise MalformedLocationError(location, f"expected prefix '{scheme_prefix}'")

    marker = location.find(ARCHIVE_SEPARATOR, len(scheme_prefix))
    if marker < 0:
        raise MalformedLocationError(location, f"no '{ARCHIVE_SEPARATOR}' separator found")

    archive_path = file_url_path_to_system_path(location[len(scheme_prefix):marker])
    entry = decode_component(location[marker + len(ARCHIVE_SEPARATOR):]).strip(PATH_SEPARATOR)
    return archive_path, entry

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _root_prefix(entry: str, requested: str) -> str:
    """Recover the container's root prefix from the entry that was found."""
    requested = requested.strip(PATH_SEPARATOR)
    if not requested:
        return entry
    if entry == requested:
        return ""
    suffix = PATH_SEPARATOR + requested
    if entry.endswith(suffix):
        return entry[: -len(suffix)]
    return ""


def _join(prefix: str, path: str) -> str:
    if not prefix:
        return path
    if not path:
        return prefix
    return prefix + PATH_SEPARATOR + path
