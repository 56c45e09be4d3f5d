from __future__ import annotations

"""
Resource Content Reader.

Reads a single resource file belonging to a code unit, from disk or from
inside an archive, using the same loading context as the enumerator.
"""

import logging
import pkgutil
from typing import Any, Optional

from resutil.core.resources.loader import CodeUnitLoader
from resutil.domain.constants import PATH_SEPARATOR
from resutil.utils.validation import assert_nonnull

logger = logging.getLogger(__name__)


def get_resource_bytes(code_unit: Any, path: str) -> Optional[bytes]:
    """
    Read a resource as raw bytes.

    Looks the path up relative to the unit's import root first, then
    relative to the unit's own package through pkgutil.

    Args:
        code_unit: Module, module name or object identifying the code unit.
        path: Logical path of the resource.

    Returns:
        Optional[bytes]: Content, or None if the resource does not exist.
    """
    assert_nonnull(code_unit, "code_unit")
    assert_nonnull(path, "path")
    path = path.strip(PATH_SEPARATOR)

    loader = CodeUnitLoader.for_code_unit(code_unit)
    data = loader.read_resource(path)
    if data is not None:
        return data

    package = loader.name if loader.is_package else loader.name.rpartition(".")[0]
    if not package or not path:
        return None

    try:
        data = pkgutil.get_data(package, path)
    except OSError:
        # zipimport reports missing entries as a bare OSError
        return None
    if data is not None:
        logger.debug(f"Resource '{path}' found relative to package '{package}'")
    return data


def get_resource_file_content(code_unit: Any, path: str, encoding: str = "utf-8") -> Optional[str]:
    """
    Read a text resource, normalizing every line to end with a newline.

    Args:
        code_unit: Module, module name or object identifying the code unit.
        path: Logical path of the resource.
        encoding: Text encoding of the resource.

    Returns:
        Optional[str]: Content, or None if the resource does not exist.
    """
    data = get_resource_bytes(code_unit, path)
    if data is None:
        return None
    return "".join(line + "\n" for line in data.decode(encoding).splitlines())
