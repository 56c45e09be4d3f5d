from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Converts between absolute filesystem paths and the locator URLs handed out
by code-unit loaders. Acts as the single place where percent-encoding and
platform path conventions are dealt with, so the resolver and the
enumerator only ever see decoded absolute paths.
"""

import os
from pathlib import Path
from urllib.parse import quote, unquote, urlsplit
from urllib.request import url2pathname

from resutil.domain.constants import (
    ARCHIVE_SCHEME,
    ARCHIVE_SEPARATOR,
    PATH_SEPARATOR,
)

# -----------------------------------------------------------------------------
# URL CONSTRUCTION
# -----------------------------------------------------------------------------

def path_to_url(path: str) -> str:
    """
    Encode an absolute filesystem path as a 'file' URL.

    Args:
        path: Filesystem path; made absolute if it is not.

    Returns:
        str: Percent-encoded URL, e.g. 'file:///tmp/my%20dir'.
    """
    return Path(os.path.abspath(path)).as_uri()


def archive_entry_url(archive_path: str, entry_name: str) -> str:
    """
    Encode the location of an entry inside an archive.

    Args:
        archive_path: Filesystem path of the archive.
        entry_name: Flat internal entry name, '/'-separated.

    Returns:
        str: URL of the form 'zip:file:///abs/archive.zip!/entry/name'.
    """
    entry = quote(entry_name.lstrip(PATH_SEPARATOR), safe=PATH_SEPARATOR)
    return f"{ARCHIVE_SCHEME}:{path_to_url(archive_path)}{ARCHIVE_SEPARATOR}{PATH_SEPARATOR}{entry}"

# -----------------------------------------------------------------------------
# URL DECODING
# -----------------------------------------------------------------------------

def url_scheme(url: str) -> str:
    """Return the lower-cased scheme of a locator URL ('' if none)."""
    return urlsplit(url).scheme.lower()


def decode_component(value: str) -> str:
    """Percent-decode a single URL component as UTF-8."""
    return unquote(value, encoding="utf-8")


def url_to_path(url: str) -> str:
    """
    Decode a 'file' URL into an absolute filesystem path.

    Args:
        url: URL previously produced by path_to_url or an equivalent encoder.

    Returns:
        str: Absolute, platform-native filesystem path.
    """
    return os.path.abspath(url2pathname(urlsplit(url).path))


def file_url_path_to_system_path(encoded: str) -> str:
    """
    Decode the path part of a 'file' URL that has already had its
    'file://' prefix removed.

    Args:
        encoded: Percent-encoded path, e.g. '/tmp/my%20dir/archive.zip'.

    Returns:
        str: Absolute, platform-native filesystem path.
    """
    return os.path.abspath(url2pathname(encoded))
