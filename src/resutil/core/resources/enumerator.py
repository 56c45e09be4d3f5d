from __future__ import annotations

"""
Archive-Transparent Resource Enumerator.

Lists the files and directories found at a logical path under a code unit,
producing the same logical view whether the unit lives in a directory tree
or inside a zip archive. Supports recursive enumeration that re-resolves
every child directory, so the plain/archive boundary is crossed uniformly
at each level.

A None result always means "path not found"; an empty set means the path
exists and holds nothing.
"""

import logging
import os
import zipfile
from typing import Any, Optional, Set

from resutil.core.resources.loader import ResourceLoader
from resutil.core.resources.locator import resolve
from resutil.domain.constants import PATH_SEPARATOR
from resutil.domain.errors import ResourceNotFoundError
from resutil.domain.resource_models import (
    ArchiveScope,
    Entry,
    PlainDirectory,
    ResolvedLocator,
    join_logical,
)
from resutil.utils.validation import assert_nonnull

logger = logging.getLogger(__name__)

# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_all_files_in_resource(
        code_unit: Any,
        path: str,
        recursive: bool = False,
        loader: Optional[ResourceLoader] = None,
) -> Optional[Set[str]]:
    """
    Return the relative paths of the files found under a resource directory.

    More reliable than looking a directory up as a single resource: inside
    archives directories usually have no entry of their own, so every level
    is resolved and scanned explicitly.

    Args:
        code_unit: Module, module name or object identifying the code unit.
        path: Logical path of the resource directory.
        recursive: Whether to descend into subdirectories.
        loader: Optional loading context overriding the import system.

    Returns:
        Optional[Set[str]]: Paths relative to 'path' using '/' separators,
                            or None if 'path' does not exist.

    Raises:
        InvalidArgumentError: If code_unit or path is None.
        UnsupportedSchemeError: If the unit's storage cannot be listed.
        MalformedLocationError: If an archive location cannot be parsed.
        OSError: If the directory or archive cannot be read.
    """
    if loader is None:
        assert_nonnull(code_unit, "code_unit")
    assert_nonnull(path, "path")
    return _collect_files(code_unit, path.strip(PATH_SEPARATOR), recursive, loader, set())


def get_resource_listing(
        code_unit: Any,
        path: str,
        loader: Optional[ResourceLoader] = None,
) -> Optional[Set[Entry]]:
    """
    Return the immediate children of a resource directory.

    Args:
        code_unit: Module, module name or object identifying the code unit.
        path: Logical path of the resource directory.
        loader: Optional loading context overriding the import system.

    Returns:
        Optional[Set[Entry]]: Children, or None if 'path' does not exist.
    """
    if loader is None:
        assert_nonnull(code_unit, "code_unit")
    assert_nonnull(path, "path")
    path = path.strip(PATH_SEPARATOR)

    try:
        locator = resolve(code_unit, path, loader=loader)
    except ResourceNotFoundError as e:
        logger.debug(str(e))
        return None

    return list_children(locator, path)


def list_children(locator: ResolvedLocator, path: str = "") -> Optional[Set[Entry]]:
    """
    List the immediate children behind a resolved locator.

    Args:
        locator: PlainDirectory or ArchiveScope.
        path: Logical path the locator was resolved for, recorded on entries.

    Returns:
        Optional[Set[Entry]]: Children, or None if nothing exists there.
    """
    assert_nonnull(locator, "locator")
    if isinstance(locator, PlainDirectory):
        return _list_plain(locator, path)
    if isinstance(locator, ArchiveScope):
        return _list_archive(locator, path)
    raise TypeError(f"Unknown locator type: {type(locator).__name__}")

# ==============================================================================
# RECURSIVE COMPOSITION
# ==============================================================================

def _collect_files(
        code_unit: Any,
        path: str,
        recursive: bool,
        loader: Optional[ResourceLoader],
        ancestors: Set[str],
) -> Optional[Set[str]]:
    """Resolve, list and (optionally) descend one level."""
    try:
        locator = resolve(code_unit, path, loader=loader)
    except ResourceNotFoundError as e:
        logger.debug(str(e))
        return None

    canonical: Optional[str] = None
    if isinstance(locator, PlainDirectory) and os.path.isdir(locator.system_path):
        # A directory already on the current descent chain is a symlink cycle
        canonical = os.path.realpath(locator.system_path)
        if canonical in ancestors:
            logger.warning(f"Skipping directory cycle at '{locator.system_path}'")
            return set()
        ancestors.add(canonical)

    try:
        children = list_children(locator, path)
        if children is None:
            return None

        files: Set[str] = set()
        for child in children:
            if child.is_file:
                files.add(child.name)
            elif recursive:
                inner = _collect_files(
                    code_unit, join_logical(path, child.name), True, loader, ancestors
                )
                files.update(child.name + PATH_SEPARATOR + f for f in (inner or set()))

        return files
    finally:
        if canonical is not None:
            ancestors.discard(canonical)

# ==============================================================================
# BACKEND LISTINGS
# ==============================================================================

def _list_plain(locator: PlainDirectory, path: str) -> Optional[Set[Entry]]:
    """List a directory on disk. Non-directories are reported as absent."""
    if not os.path.isdir(locator.system_path):
        return None

    entries: Set[Entry] = set()
    with os.scandir(locator.system_path) as it:
        for item in it:
            entries.add(Entry(name=item.name, parent_path=path, is_file=not item.is_dir()))
    return entries


def _list_archive(locator: ArchiveScope, path: str) -> Optional[Set[Entry]]:
    """
    Scan an archive's entry table for the children under a prefix.

    The archive is opened for the duration of this call only. A child whose
    name was truncated at a separator has nested content and is a directory;
    any other child is a file candidate.
    """
    prefix = locator.entry_prefix.strip(PATH_SEPARATOR)
    found = False
    entries: Set[Entry] = set()

    try:
        with zipfile.ZipFile(locator.archive_path) as archive:
            for info in archive.infolist():
                remainder = _strip_prefix(info.filename, prefix)
                if remainder is None:
                    continue
                if remainder == "" and not info.is_dir() and prefix:
                    # The prefix names a file, which has no children
                    continue
                found = True

                separator = remainder.find(PATH_SEPARATOR)
                if separator > -1:
                    name, is_file = remainder[:separator], False
                else:
                    name, is_file = remainder, True

                if name:
                    entries.add(Entry(name=name, parent_path=path, is_file=is_file))
    except (OSError, zipfile.BadZipFile) as e:
        logger.error(f"Failed to scan archive '{locator.archive_path}': {e}")
        raise

    if not found:
        return None

    # A directory entry and nested content may describe the same child
    directories = {e.name for e in entries if not e.is_file}
    return {e for e in entries if not (e.is_file and e.name in directories)}


def _strip_prefix(name: str, prefix: str) -> Optional[str]:
    """
    Return what follows 'prefix' in an entry name, without the leading
    separator, or None when the entry is not under the prefix.
    """
    if not prefix:
        return name
    if not name.startswith(prefix):
        return None
    remainder = name[len(prefix):]
    if remainder and not remainder.startswith(PATH_SEPARATOR):
        # 'pkg/res' must not match 'pkg/resources/...'
        return None
    return remainder[1:] if remainder.startswith(PATH_SEPARATOR) else remainder
