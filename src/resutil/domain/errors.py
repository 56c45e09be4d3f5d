from __future__ import annotations

"""
Error Taxonomy.

Every failure raised by the resource subsystem derives from ResourceError so
callers can trap the whole family at once. Low-level I/O failures are not
wrapped: OSError and zipfile.BadZipFile reach the caller unchanged.
"""

from typing import Optional


class ResourceError(Exception):
    """Base class for resource resolution and enumeration failures."""


class InvalidArgumentError(ResourceError, ValueError):
    """A required argument was None, empty or out of range."""


class ResourceNotFoundError(ResourceError, LookupError):
    """
    The queried path does not exist under the code unit's root.

    The enumerator translates this into an absent (None) result; only the
    resolver raises it.
    """

    def __init__(self, path: str, code_unit: str):
        super().__init__(f"Resource path '{path}' was not found under code unit '{code_unit}'")
        self.path = path
        self.code_unit = code_unit


class UnsupportedSchemeError(ResourceError):
    """The resolved location uses a scheme that is neither plain nor archive."""

    def __init__(self, scheme: str, location: str):
        super().__init__(
            f"Cannot list files for location '{location}' because scheme '{scheme}' is unknown"
        )
        self.scheme = scheme
        self.location = location


class MalformedLocationError(ResourceError):
    """An archive location lacks the separator marker between archive and entry."""

    def __init__(self, location: str, reason: Optional[str] = None):
        message = f"Malformed archive location '{location}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.location = location


class DuplicateKeyError(ValueError):
    """Two values were offered for the same key while building a map."""

    def __init__(self, key: object, existing: object, incoming: object):
        super().__init__(
            f"Duplicate key {key} (attempted merging values {existing} and {incoming})"
        )
        self.key = key
        self.existing = existing
        self.incoming = incoming
