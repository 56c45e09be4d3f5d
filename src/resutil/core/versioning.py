from __future__ import annotations

"""
Code Unit Version Discovery.

Determines which version a code unit was shipped with, consulting the
package itself, the installed distribution metadata and finally a
'version.properties' resource at the unit's import root.
"""

import importlib
import logging
from importlib import metadata
from types import ModuleType
from typing import Any, Optional

from resutil.core.resources.loader import CodeUnitLoader
from resutil.domain.constants import UNKNOWN_VERSION, VERSION_PROPERTY, VERSION_RESOURCE
from resutil.domain.version import Version

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def version_of(code_unit: Any) -> Version:
    """
    Discover and parse the version of a code unit.

    Args:
        code_unit: Module, module name or object identifying the code unit.

    Returns:
        Version: Parsed version, 'X.Y.Z' when nothing declares one.
    """
    return Version.parse(find_version(code_unit) or UNKNOWN_VERSION)


def find_version(code_unit: Any) -> Optional[str]:
    """
    Look up the version string a code unit declares.

    Sources, in order:
    1. The top-level package's '__version__' attribute.
    2. Installed distribution metadata owning the top-level package.
    3. A 'version.properties' resource ('version=...') at the import root.

    Args:
        code_unit: Module, module name or object identifying the code unit.

    Returns:
        Optional[str]: The version string, or None if none is declared.
    """
    loader = CodeUnitLoader.for_code_unit(code_unit)
    top_level = loader.name.split(".")[0]

    module = _import_quietly(top_level)
    declared = getattr(module, "__version__", None) if module is not None else None
    if isinstance(declared, str) and declared:
        return declared

    for distribution in metadata.packages_distributions().get(top_level, []):
        try:
            return metadata.version(distribution)
        except metadata.PackageNotFoundError:
            continue

    properties = loader.read_resource(VERSION_RESOURCE)
    if properties is not None:
        return _read_property(properties.decode("utf-8"), VERSION_PROPERTY)

    logger.debug(f"No version declared for code unit '{loader.name}'")
    return None

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _import_quietly(name: str) -> Optional[ModuleType]:
    try:
        return importlib.import_module(name)
    except ImportError:
        logger.debug(f"Top-level package '{name}' is not importable")
        return None


def _read_property(text: str, key: str) -> Optional[str]:
    """Extract the value of 'key' from a '.properties' formatted text."""
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in "#!":
            continue
        name, sep, value = line.partition("=")
        if not sep:
            name, sep, value = line.partition(":")
        if sep and name.strip() == key:
            return value.strip() or None
    return None
