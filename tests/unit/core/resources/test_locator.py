from __future__ import annotations

"""
Unit tests for Resource Locator Resolution.

Drives the resolver with in-memory loaders that hand out canned locator
URLs, covering the plain and archive branches, the container fallback
through the unit's own resource, and every failure mode.
"""

import os
from typing import Dict, List, Optional

import pytest

from resutil.core.resources.loader import ResourceLoader
from resutil.core.resources.locator import parse_archive_location, resolve
from resutil.domain.errors import (
    InvalidArgumentError,
    MalformedLocationError,
    ResourceNotFoundError,
    UnsupportedSchemeError,
)
from resutil.domain.resource_models import ArchiveScope, PlainDirectory


class FakeLoader:
    """Loader answering from a fixed name -> URL table."""

    def __init__(self, locations: Dict[str, str], type_name: str = "pkg/mod.py"):
        self.name = "pkg.mod"
        self.locations = locations
        self.type_name = type_name
        self.requests: List[str] = []

    def get_resource(self, name: str) -> Optional[str]:
        self.requests.append(name)
        return self.locations.get(name)

    def type_resource_name(self) -> str:
        return self.type_name


def test_fake_loader_satisfies_protocol() -> None:
    """The resolver only needs the ResourceLoader capability."""
    assert isinstance(FakeLoader({}), ResourceLoader)


def test_resolve_direct_plain_location() -> None:
    """A 'file' URL for the path itself yields a PlainDirectory."""
    loader = FakeLoader({"root": "file:///srv/app/root"})

    locator = resolve(None, "root", loader=loader)

    assert locator == PlainDirectory(system_path=os.path.abspath("/srv/app/root"))
    assert loader.requests == ["root"]


def test_resolve_decodes_percent_encoding() -> None:
    """Encoded characters in plain locations are decoded."""
    loader = FakeLoader({"my dir": "file:///srv/my%20dir"})

    locator = resolve(None, "my dir", loader=loader)

    assert isinstance(locator, PlainDirectory)
    assert locator.system_path.endswith("my dir")


def test_resolve_strips_surrounding_separators() -> None:
    """Leading and trailing separators do not change the lookup."""
    loader = FakeLoader({"root/sub": "file:///srv/root/sub"})

    assert resolve(None, "/root/sub/", loader=loader) == PlainDirectory(os.path.abspath("/srv/root/sub"))


def test_resolve_missing_path_under_plain_container() -> None:
    """A plain root answers existing paths directly, so a fallback hit means missing."""
    loader = FakeLoader({"pkg/mod.py": "file:///srv/app/pkg/mod.py"})

    with pytest.raises(ResourceNotFoundError):
        resolve(None, "missing", loader=loader)

    assert loader.requests == ["missing", "pkg/mod.py"]


def test_resolve_missing_path_under_plain_namespace_package() -> None:
    """The unit's own directory is never mistaken for the missing path."""
    loader = FakeLoader({"pkg": "file:///srv/app/pkg"}, type_name="pkg")

    with pytest.raises(ResourceNotFoundError):
        resolve(None, "does/not/exist", loader=loader)


def test_resolve_archive_via_type_resource() -> None:
    """Directories without entries are scoped through the unit's own entry."""
    loader = FakeLoader({"pkg/mod.py": "zip:file:///opt/lib/app.zip!/pkg/mod.py"})

    locator = resolve(None, "pkg/res", loader=loader)

    assert locator == ArchiveScope(archive_path=os.path.abspath("/opt/lib/app.zip"), entry_prefix="pkg/res")


def test_resolve_archive_direct_entry() -> None:
    """A directory with its own entry resolves to that entry's prefix."""
    loader = FakeLoader({"pkg/res": "zip:file:///opt/app.zip!/pkg/res/"})

    locator = resolve(None, "pkg/res", loader=loader)

    assert locator == ArchiveScope(archive_path=os.path.abspath("/opt/app.zip"), entry_prefix="pkg/res")


def test_resolve_archive_nested_import_root() -> None:
    """An import root nested inside the archive is carried into the prefix."""
    loader = FakeLoader({"pkg/mod.py": "zip:file:///opt/app.zip!/lib/python/pkg/mod.py"})

    locator = resolve(None, "pkg/res", loader=loader)

    assert isinstance(locator, ArchiveScope)
    assert locator.entry_prefix == "lib/python/pkg/res"


def test_resolve_archive_root_path() -> None:
    """The empty path scopes the whole import root."""
    loader = FakeLoader({"pkg/mod.py": "zip:file:///opt/app.zip!/pkg/mod.py"})

    locator = resolve(None, "", loader=loader)

    assert locator == ArchiveScope(archive_path=os.path.abspath("/opt/app.zip"), entry_prefix="")


def test_resolve_raises_not_found_when_unit_unknown() -> None:
    """Neither the path nor the unit's own resource can be located."""
    loader = FakeLoader({})

    with pytest.raises(ResourceNotFoundError) as exc_info:
        resolve(None, "res", loader=loader)

    assert exc_info.value.path == "res"
    assert exc_info.value.code_unit == "pkg.mod"


def test_resolve_rejects_unknown_scheme() -> None:
    """Locations that are neither plain nor archive cannot be listed."""
    loader = FakeLoader({"res": "http://example.com/pkg/res"})

    with pytest.raises(UnsupportedSchemeError) as exc_info:
        resolve(None, "res", loader=loader)

    assert exc_info.value.scheme == "http"
    assert "http://example.com/pkg/res" in str(exc_info.value)


def test_resolve_rejects_archive_without_marker() -> None:
    """An archive URL lacking '!' is malformed."""
    loader = FakeLoader({"pkg/mod.py": "zip:file:///opt/app.zip/pkg/mod.py"})

    with pytest.raises(MalformedLocationError):
        resolve(None, "res", loader=loader)


def test_resolve_requires_path() -> None:
    """A None path is an invalid argument."""
    with pytest.raises(InvalidArgumentError):
        resolve(None, None, loader=FakeLoader({}))  # type: ignore[arg-type]


def test_resolve_builtin_module_is_unsupported() -> None:
    """Built-in modules have no listable storage."""
    with pytest.raises(UnsupportedSchemeError) as exc_info:
        resolve("sys", "anything")

    assert exc_info.value.scheme == "built-in"


# -----------------------------------------------------------------------------
# parse_archive_location
# -----------------------------------------------------------------------------

def test_parse_archive_location_splits_on_first_marker() -> None:
    """The archive ends at the first '!', the entry follows it."""
    archive, entry = parse_archive_location("zip:file:///opt/app.zip!/pkg/a!b.txt")

    assert archive == os.path.abspath("/opt/app.zip")
    assert entry == "pkg/a!b.txt"


def test_parse_archive_location_decodes_both_parts() -> None:
    """Archive path and entry are percent-decoded."""
    archive, entry = parse_archive_location("zip:file:///opt/my%20libs/app.zip!/pkg/with%20space")

    assert archive == os.path.abspath("/opt/my libs/app.zip")
    assert entry == "pkg/with space"


@pytest.mark.parametrize(
    "location",
    [
        "zip:file:///opt/app.zip",
        "jar:file:///opt/app.jar!/x",
        "file:///opt/app.zip!/x",
    ],
)
def test_parse_archive_location_rejects_malformed(location: str) -> None:
    """Missing marker or wrong prefix is reported with the location."""
    with pytest.raises(MalformedLocationError) as exc_info:
        parse_archive_location(location)

    assert exc_info.value.location == location
