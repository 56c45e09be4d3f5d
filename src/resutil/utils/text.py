from __future__ import annotations

"""
Text Formatting Utilities.

Lightweight '{}'-placeholder templating for diagnostic messages, readable
object dumps, random identifiers and hexadecimal encoding.
"""

import random
import secrets
import string
from dataclasses import fields, is_dataclass
from typing import Any, Optional

from resutil.utils.validation import assert_natural_number, assert_nonnull

PLACEHOLDER = "{}"
ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits
_HEX_DIGITS = "0123456789ABCDEF"

_default_random: Optional[random.Random] = None

# -----------------------------------------------------------------------------
# MESSAGE TEMPLATING
# -----------------------------------------------------------------------------

def format_message(message: Optional[str], *args: Any) -> str:
    """
    Substitute '{}' placeholders with arguments, left to right.

    Placeholders without a matching argument are kept verbatim and surplus
    arguments are ignored. No other brace syntax is interpreted, so the
    message may freely contain '{name}' or '{0}'.

    Args:
        message: Template text.
        *args: Values rendered with str(); None renders as 'None'.

    Returns:
        str: The rendered message ('None' if message is None).
    """
    if message is None:
        return "None"
    if not args:
        return message

    out = []
    previous = 0
    for arg in args:
        brace = message.find(PLACEHOLDER, previous)
        if brace < 0:
            break
        out.append(message[previous:brace])
        out.append(arg if isinstance(arg, str) else str(arg))
        previous = brace + len(PLACEHOLDER)
    out.append(message[previous:])
    return "".join(out)


# Short alias for call sites building exception messages
f = format_message

# -----------------------------------------------------------------------------
# OBJECT RENDERING
# -----------------------------------------------------------------------------

def sensible_to_string(value: Any) -> str:
    """Render a value for diagnostics, quoting strings."""
    if value is None:
        return "None"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def simple_to_string(obj: Any) -> str:
    """
    Render an object as 'ClassName(field=value, ...)'.

    Dataclasses contribute their declared fields; other objects their
    instance attributes. Strings are returned unchanged.

    Args:
        obj: Object to render.

    Returns:
        str: Readable representation.
    """
    assert_nonnull(obj, "obj")
    if isinstance(obj, str):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        items = [(fd.name, getattr(obj, fd.name)) for fd in fields(obj)]
    else:
        items = list(getattr(obj, "__dict__", {}).items())

    body = ", ".join(f"{name}={sensible_to_string(value)}" for name, value in items)
    return f"{type(obj).__name__}({body})"

# -----------------------------------------------------------------------------
# RANDOM STRINGS
# -----------------------------------------------------------------------------

def generate_string(length: int, rng: Optional[random.Random] = None) -> str:
    """
    Generate a random alphanumeric string.

    Args:
        length: Number of characters, zero or more.
        rng: Random source; a shared cryptographically secure one by default.

    Returns:
        str: Random string of exactly 'length' characters.

    Raises:
        InvalidArgumentError: If length is negative or not an integer.
    """
    assert_natural_number(length, "length")
    source = rng if rng is not None else _get_random()
    return "".join(source.choice(ALPHANUMERIC) for _ in range(length))


def _get_random() -> random.Random:
    global _default_random
    if _default_random is None:
        _default_random = secrets.SystemRandom()
    return _default_random

# -----------------------------------------------------------------------------
# HEX ENCODING
# -----------------------------------------------------------------------------

def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as upper-case hexadecimal, two digits per byte."""
    assert_nonnull(data, "data")
    return "".join(_HEX_DIGITS[b >> 4] + _HEX_DIGITS[b & 0x0F] for b in bytes(data))


def hex_to_bytes(value: str) -> bytes:
    """
    Decode a hexadecimal string (either case) into bytes.

    Raises:
        InvalidArgumentError: If value is None.
        ValueError: If value has an odd length or non-hex characters.
    """
    assert_nonnull(value, "value")
    return bytes.fromhex(value)
