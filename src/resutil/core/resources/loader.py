from __future__ import annotations

"""
Code Unit Loading Context.

Maps a code unit (module, dotted module name, or any object carrying a
'__module__') onto the import root it was loaded from, and answers the two
questions the resolver needs: "is there a resource at this root-relative
name, and where?" and "what is the unit's own resource name?".

Import roots come in three flavours:
- directory: a plain sys.path directory (file-based loaders).
- archive: a zip-structured file on sys.path (zipimport).
- other: built-in, frozen or custom loaders with no listable location.
"""

import importlib.util
import logging
import os
import sys
import zipfile
import zipimport
from importlib.machinery import ModuleSpec
from types import ModuleType
from typing import Any, Optional, Protocol, Tuple, runtime_checkable

from resutil.domain.constants import PATH_SEPARATOR
from resutil.domain.errors import InvalidArgumentError
from resutil.infra.fs import archive_entry_url, path_to_url
from resutil.utils.validation import assert_nonnull

logger = logging.getLogger(__name__)

ROOT_DIRECTORY = "directory"
ROOT_ARCHIVE = "archive"
ROOT_OTHER = "other"

# -----------------------------------------------------------------------------
# LOADER CAPABILITY
# -----------------------------------------------------------------------------

@runtime_checkable
class ResourceLoader(Protocol):
    """Capability consumed by the resolver."""

    name: str

    def get_resource(self, name: str) -> Optional[str]:
        """Return a locator URL for a root-relative name, or None."""
        ...

    def type_resource_name(self) -> str:
        """Return the root-relative resource name of the unit itself."""
        ...

# -----------------------------------------------------------------------------
# IMPORT-SYSTEM BACKED LOADER
# -----------------------------------------------------------------------------

class CodeUnitLoader:
    """
    Resolves root-relative resource names for a single imported module.

    Instances are cheap and hold no open handles; archives are opened and
    closed inside each call.
    """

    def __init__(self, spec: ModuleSpec):
        """
        Initialize the loader from a module spec.

        Args:
            spec: Spec of the module acting as code unit.
        """
        self.spec = assert_nonnull(spec, "spec")
        self.name: str = spec.name
        self.is_package = spec.submodule_search_locations is not None
        self.kind, self.root, self.root_prefix = _locate_root(spec, self._relative_parts())
        logger.debug(
            f"Code unit '{self.name}' rooted at {self.kind} '{self.root}' "
            f"(prefix='{self.root_prefix}')"
        )

    @classmethod
    def for_code_unit(cls, code_unit: Any) -> CodeUnitLoader:
        """
        Build a loader for a module, a dotted module name, or an object
        defined in a module.

        Args:
            code_unit: Module object, module name, class, function or
                       instance whose '__module__' identifies the unit.

        Returns:
            CodeUnitLoader: Loader bound to the unit's import root.

        Raises:
            InvalidArgumentError: If the unit is None or cannot be located.
        """
        assert_nonnull(code_unit, "code_unit")
        return cls(_spec_for(code_unit))

    # -------------------------------------------------------------------------
    # RESOURCE LOOKUP
    # -------------------------------------------------------------------------

    def type_resource_name(self) -> str:
        """
        Return the unit's own root-relative resource name.

        'pkg/mod.py' for a module and 'pkg/__init__.py' for a regular
        package. Namespace packages map onto their directory.
        """
        return PATH_SEPARATOR.join(self._relative_parts())

    def get_resource(self, name: str) -> Optional[str]:
        """
        Locate a root-relative resource.

        Args:
            name: Logical path relative to the import root ('' is the root).

        Returns:
            Optional[str]: Locator URL, or None if nothing exists at that name.
        """
        name = name.strip(PATH_SEPARATOR)

        if self.kind == ROOT_DIRECTORY:
            candidate = self._system_path(name)
            if os.path.exists(candidate):
                return path_to_url(candidate)
            return None

        if self.kind == ROOT_ARCHIVE:
            entry = _join_entry(self.root_prefix, name)
            with zipfile.ZipFile(self.root) as archive:
                if _has_entry(archive, entry):
                    return archive_entry_url(self.root, entry)
            return None

        # Built-in, frozen and custom loaders only know about the unit itself
        if name == self.type_resource_name():
            return f"{self.root}:{name}"
        return None

    def read_resource(self, name: str) -> Optional[bytes]:
        """
        Read a root-relative resource in full.

        Args:
            name: Logical path of the resource.

        Returns:
            Optional[bytes]: Content, or None if no file exists at that name.
        """
        name = name.strip(PATH_SEPARATOR)
        if not name:
            return None

        if self.kind == ROOT_DIRECTORY:
            candidate = self._system_path(name)
            if not os.path.isfile(candidate):
                return None
            with open(candidate, "rb") as f:
                return f.read()

        if self.kind == ROOT_ARCHIVE:
            entry = _join_entry(self.root_prefix, name)
            with zipfile.ZipFile(self.root) as archive:
                try:
                    info = archive.getinfo(entry)
                except KeyError:
                    return None
                if info.is_dir():
                    return None
                return archive.read(info)

        return None

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _relative_parts(self) -> Tuple[str, ...]:
        """Split the unit's own resource name into path segments."""
        parts = self.name.split(".")
        origin = self.spec.origin if self.spec.has_location else None
        if not origin:
            return tuple(parts)
        basename = os.path.basename(origin)
        if self.is_package:
            return tuple(parts) + (basename,)
        return tuple(parts[:-1]) + (basename,)

    def _system_path(self, name: str) -> str:
        if not name:
            return self.root
        return os.path.join(self.root, *name.split(PATH_SEPARATOR))

    def __repr__(self) -> str:
        return f"CodeUnitLoader(name={self.name!r}, kind={self.kind!r}, root={self.root!r})"

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: SPEC DISCOVERY
# -----------------------------------------------------------------------------

def _spec_for(code_unit: Any) -> ModuleSpec:
    """Find the module spec behind a code unit."""
    if isinstance(code_unit, ModuleType):
        module_name = code_unit.__name__
        spec = getattr(code_unit, "__spec__", None)
    elif isinstance(code_unit, str):
        module_name = code_unit
        spec = None
    else:
        module_name = getattr(code_unit, "__module__", None) or type(code_unit).__module__
        spec = None

    if spec is None:
        module = sys.modules.get(module_name)
        spec = getattr(module, "__spec__", None) if module is not None else None

    if spec is None:
        try:
            spec = importlib.util.find_spec(module_name)
        except (ImportError, ValueError) as e:
            raise InvalidArgumentError(f"Code unit '{module_name}' cannot be located: {e}") from e

    if spec is None:
        raise InvalidArgumentError(f"Code unit '{module_name}' cannot be located")
    return spec


def _locate_root(spec: ModuleSpec, relative_parts: Tuple[str, ...]) -> Tuple[str, str, str]:
    """
    Determine the import root a spec was loaded from.

    Returns:
        Tuple[str, str, str]: (kind, root, root_prefix). For archives the
        root is the archive path and root_prefix the internal directory
        acting as import root. For other loaders the root is the origin tag.
    """
    loader = spec.loader

    if isinstance(loader, zipimport.zipimporter):
        archive_path = os.path.abspath(loader.archive)
        origin = spec.origin or ""
        inner = origin[len(loader.archive):].replace(os.sep, PATH_SEPARATOR).strip(PATH_SEPARATOR)
        relative = PATH_SEPARATOR.join(relative_parts)
        prefix = inner[: -len(relative)] if inner.endswith(relative) else ""
        return ROOT_ARCHIVE, archive_path, prefix.strip(PATH_SEPARATOR)

    if spec.has_location and spec.origin:
        native_relative = os.path.join(*relative_parts)
        origin = os.path.abspath(spec.origin)
        if origin.endswith(native_relative):
            return ROOT_DIRECTORY, origin[: -len(native_relative)].rstrip(os.sep) or os.sep, ""
        # Walk up one level per dotted component
        root = os.path.dirname(origin)
        for _ in range(len(relative_parts) - 1):
            root = os.path.dirname(root)
        return ROOT_DIRECTORY, root, ""

    locations = list(spec.submodule_search_locations or [])
    if locations and os.path.isdir(locations[0]):
        root = os.path.abspath(locations[0])
        for _ in range(len(relative_parts)):
            root = os.path.dirname(root)
        return ROOT_DIRECTORY, root, ""

    return ROOT_OTHER, (spec.origin or "unknown").lower(), ""


def _join_entry(prefix: str, name: str) -> str:
    if not prefix:
        return name
    if not name:
        return prefix
    return prefix + PATH_SEPARATOR + name


def _has_entry(archive: zipfile.ZipFile, entry: str) -> bool:
    """Check for an explicit file or directory entry."""
    if not entry:
        return True
    for candidate in (entry, entry + PATH_SEPARATOR):
        try:
            archive.getinfo(candidate)
            return True
        except KeyError:
            continue
    return False
