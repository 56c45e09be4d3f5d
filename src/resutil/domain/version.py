from __future__ import annotations

"""
Semantic Version Model.

Parses 'MAJOR.MINOR[.PATCH[-SNAPSHOT]]' strings into their components.
"""

from dataclasses import dataclass
from typing import Optional

from resutil.domain.errors import InvalidArgumentError
from resutil.utils.validation import assert_nonempty_string


@dataclass(frozen=True)
class Version:
    """
    Immutable, parsed version string.

    Attributes:
        version: The original string.
        major: First dot-separated component.
        minor: Second dot-separated component.
        patch: Third component without any snapshot suffix, if present.
        snapshot: Text after the first '-' of the third component, if present.
    """
    version: str
    major: str
    minor: str
    patch: Optional[str] = None
    snapshot: Optional[str] = None

    @classmethod
    def parse(cls, version: str) -> Version:
        """
        Parse a version string.

        Args:
            version: String such as '1.6.0' or '2.1.3-SNAPSHOT'.

        Returns:
            Version: Parsed components.

        Raises:
            InvalidArgumentError: If the string is empty or has no minor component.
        """
        assert_nonempty_string(version, "version")
        parts = version.split(".")
        if len(parts) < 2:
            raise InvalidArgumentError(f"Version '{version}' must contain at least major and minor")

        patch: Optional[str] = None
        snapshot: Optional[str] = None
        if len(parts) > 2:
            # The last part may carry a snapshot suffix after a dash
            patch_parts = parts[2].split("-")
            patch = patch_parts[0]
            snapshot = patch_parts[1] if len(patch_parts) >= 2 else None

        return cls(version=version, major=parts[0], minor=parts[1], patch=patch, snapshot=snapshot)

    def __str__(self) -> str:
        return self.version

