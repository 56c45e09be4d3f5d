from __future__ import annotations

"""
Domain Constants.

Centralizes the addressing vocabulary shared by the resolver and the
enumerator: URL schemes, separators and the fixed markers used to pick an
archive location apart.
"""

# -----------------------------------------------------------------------------
# LOGICAL ADDRESSING
# -----------------------------------------------------------------------------

PATH_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# LOCATOR SCHEMES
# -----------------------------------------------------------------------------

FILE_SCHEME = "file"
ARCHIVE_SCHEME = "zip"

# "zip:file:///abs/archive.zip!/entry/name"
FILE_URL_PREFIX = "file://"
ARCHIVE_SEPARATOR = "!"

# -----------------------------------------------------------------------------
# VERSIONING
# -----------------------------------------------------------------------------

UNKNOWN_VERSION = "X.Y.Z"
VERSION_RESOURCE = "version.properties"
VERSION_PROPERTY = "version"
