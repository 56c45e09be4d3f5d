from __future__ import annotations

"""
Unit tests for Text Formatting Utilities.

Covers '{}' placeholder substitution, readable object rendering, random
string generation and hexadecimal conversion.
"""

import random
from dataclasses import dataclass

import pytest

from resutil.domain.errors import InvalidArgumentError
from resutil.utils.text import (
    ALPHANUMERIC,
    bytes_to_hex,
    f,
    format_message,
    generate_string,
    hex_to_bytes,
    sensible_to_string,
    simple_to_string,
)

# -----------------------------------------------------------------------------
# format_message
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "message, args, expected",
    [
        ("Test {} and {}", ("1", "2"), "Test 1 and 2"),
        ("Value: {}", (None,), "Value: None"),
        ("{}{}", (1, 2.5), "12.5"),
        ("Only {}", ("a", "b"), "Only a"),
        ("{} then {} then {}", ("a",), "a then {} then {}"),
        ("No placeholders", ("ignored",), "No placeholders"),
        ("Keeps {name} and {0}: {}", ("x",), "Keeps {name} and {0}: x"),
        ("Nested {}", ("{}",), "Nested {}"),
    ],
)
def test_format_message(message: str, args: tuple, expected: str) -> None:
    """Placeholders are filled left to right, extras on either side are tolerated."""
    assert format_message(message, *args) == expected


def test_format_message_none_template() -> None:
    """A None template renders as the text 'None'."""
    assert format_message(None, "x") == "None"


def test_format_message_without_args_is_identity() -> None:
    assert format_message("Hello {}") == "Hello {}"


def test_short_alias() -> None:
    assert f is format_message

# -----------------------------------------------------------------------------
# Object rendering
# -----------------------------------------------------------------------------

@dataclass
class Sample:
    a: str
    n: int
    missing: object = None


class Plain:
    def __init__(self) -> None:
        self.label = "x"
        self.count = 3


def test_simple_to_string_dataclass() -> None:
    """Dataclass fields render in declaration order; strings are quoted."""
    assert simple_to_string(Sample(a="x", n=1)) == 'Sample(a="x", n=1, missing=None)'


def test_simple_to_string_plain_object() -> None:
    assert simple_to_string(Plain()) == 'Plain(label="x", count=3)'


def test_simple_to_string_string_passthrough() -> None:
    assert simple_to_string("already text") == "already text"


def test_simple_to_string_rejects_none() -> None:
    with pytest.raises(InvalidArgumentError):
        simple_to_string(None)


def test_sensible_to_string() -> None:
    assert sensible_to_string(None) == "None"
    assert sensible_to_string("a") == '"a"'
    assert sensible_to_string(42) == "42"

# -----------------------------------------------------------------------------
# Random strings
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("length", [0, 1, 16, 64])
def test_generate_string_length_and_alphabet(length: int) -> None:
    """Strings have the requested length and use alphanumerics only."""
    value = generate_string(length)

    assert len(value) == length
    assert set(value) <= set(ALPHANUMERIC)


def test_generate_string_is_reproducible_with_seeded_source() -> None:
    """An explicit random source controls the output."""
    assert generate_string(12, random.Random(7)) == generate_string(12, random.Random(7))


@pytest.mark.parametrize("bad", [-1, None, 2.5, True])
def test_generate_string_rejects_bad_length(bad: object) -> None:
    with pytest.raises(InvalidArgumentError):
        generate_string(bad)  # type: ignore[arg-type]

# -----------------------------------------------------------------------------
# Hex encoding
# -----------------------------------------------------------------------------

def test_bytes_to_hex_is_upper_case() -> None:
    assert bytes_to_hex(b"\x00\x0f\xab\xff") == "000FABFF"
    assert bytes_to_hex(b"") == ""


def test_hex_to_bytes_accepts_either_case() -> None:
    assert hex_to_bytes("000fabFF") == b"\x00\x0f\xab\xff"


@pytest.mark.parametrize("bad", ["abc", "zz"])
def test_hex_to_bytes_rejects_malformed(bad: str) -> None:
    with pytest.raises(ValueError):
        hex_to_bytes(bad)


def test_hex_helpers_reject_none() -> None:
    with pytest.raises(InvalidArgumentError):
        bytes_to_hex(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        hex_to_bytes(None)  # type: ignore[arg-type]
