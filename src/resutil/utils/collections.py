from __future__ import annotations

"""
Collection Utilities.

Normalizes collections into read-only views without re-wrapping values
that are already read-only, merges sets with as little copying as
possible, and builds maps that refuse duplicate keys.
"""

from types import MappingProxyType
from typing import (
    AbstractSet,
    Dict,
    FrozenSet,
    Hashable,
    Iterable,
    Mapping,
    Sequence,
    Set,
    Tuple,
    TypeVar,
)

from resutil.domain.errors import DuplicateKeyError
from resutil.utils.functional import FunctionWithException
from resutil.utils.validation import assert_nonnull

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")

# -----------------------------------------------------------------------------
# READ-ONLY VIEWS
# -----------------------------------------------------------------------------

def unmodifiable_map(original: Mapping[K, V]) -> Mapping[K, V]:
    """
    Return a read-only view of a mapping.

    The view reflects later changes to the original. A mapping that is
    already a read-only view is returned as is.
    """
    assert_nonnull(original, "original")
    if isinstance(original, MappingProxyType):
        return original
    return MappingProxyType(original)


def unmodifiable_set(original: AbstractSet[V]) -> FrozenSet[V]:
    """Return a frozen copy of a set; a frozenset is returned as is."""
    assert_nonnull(original, "original")
    if isinstance(original, frozenset):
        return original
    return frozenset(original)


def unmodifiable_list(original: Sequence[V]) -> Tuple[V, ...]:
    """Return a tuple copy of a sequence; a tuple is returned as is."""
    assert_nonnull(original, "original")
    if isinstance(original, tuple):
        return original
    return tuple(original)


def as_set(*items: V) -> Set[V]:
    return set(items)

# -----------------------------------------------------------------------------
# SET ALGEBRA
# -----------------------------------------------------------------------------

def union(first: AbstractSet[V], second: AbstractSet[V], *more: AbstractSet[V]) -> AbstractSet[V]:
    """
    Union of two or more sets.

    When exactly one input is non-empty that input object is returned
    unchanged; otherwise a new set is built. Callers must not mutate the
    result unless they own every input.

    Args:
        first: First set.
        second: Second set.
        *more: Additional sets.

    Returns:
        AbstractSet[V]: The union.
    """
    assert_nonnull(first, "first")
    assert_nonnull(second, "second")

    non_empty_more = [s for s in more if s]
    if not non_empty_more and not second:
        return first
    if not non_empty_more and not first:
        return second
    if len(non_empty_more) == 1 and not first and not second:
        return non_empty_more[0]

    combined: Set[V] = set(first)
    combined.update(second)
    for s in more:
        combined.update(s)
    return combined


def unmodifiable_union(first: AbstractSet[V], second: AbstractSet[V], *more: AbstractSet[V]) -> FrozenSet[V]:
    """Read-only union of two or more sets."""
    return unmodifiable_set(union(first, second, *more))

# -----------------------------------------------------------------------------
# UNIQUE-KEY MAP BUILDING
# -----------------------------------------------------------------------------

def to_unique_map(pairs: Iterable[Tuple[K, V]]) -> Dict[K, V]:
    """
    Build a dict from key/value pairs, rejecting duplicate keys.

    Args:
        pairs: Iterable of (key, value) tuples, e.g. dict.items().

    Returns:
        Dict[K, V]: New dictionary.

    Raises:
        DuplicateKeyError: If a key occurs twice.
        InvalidArgumentError: If a value is None.
    """
    out: Dict[K, V] = {}
    for key, value in pairs:
        _put_unique(out, key, value)
    return out


def to_unique_map_by(
        items: Iterable[T],
        key_mapper: FunctionWithException[T, K],
        value_mapper: FunctionWithException[T, V],
) -> Dict[K, V]:
    """Build a dict by mapping every item to a key and a value."""
    return to_unique_map((key_mapper(item), value_mapper(item)) for item in items)


def merge_unique_maps(target: Dict[K, V], other: Mapping[K, V]) -> Dict[K, V]:
    """
    Merge 'other' into 'target' in place, rejecting shared keys.

    Returns:
        Dict[K, V]: The updated target.
    """
    for key, value in other.items():
        _put_unique(target, key, value)
    return target


def _put_unique(target: Dict[K, V], key: K, value: V) -> None:
    assert_nonnull(value, f"value for key {key!r}")
    if key in target:
        raise DuplicateKeyError(key, target[key], value)
    target[key] = value
