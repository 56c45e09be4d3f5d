from __future__ import annotations

"""
Callable Interfaces.

Structural types for suppliers, functions and consumers of one to four
arguments. Any Python callable may raise, so the '*WithException' variants
differ from the plain ones only in intent: they document that the callee is
expected to raise and that the caller propagates whatever it raises.
"""

from typing import Protocol, TypeVar, runtime_checkable

A = TypeVar("A", contravariant=True)
B = TypeVar("B", contravariant=True)
C = TypeVar("C", contravariant=True)
D = TypeVar("D", contravariant=True)
R = TypeVar("R", covariant=True)

# -----------------------------------------------------------------------------
# SUPPLIERS
# -----------------------------------------------------------------------------

@runtime_checkable
class SupplierWithException(Protocol[R]):
    def __call__(self) -> R: ...

# -----------------------------------------------------------------------------
# FUNCTIONS
# -----------------------------------------------------------------------------

@runtime_checkable
class FunctionWithException(Protocol[A, R]):
    def __call__(self, a: A) -> R: ...


@runtime_checkable
class BiFunctionWithException(Protocol[A, B, R]):
    def __call__(self, a: A, b: B) -> R: ...


@runtime_checkable
class TriFunction(Protocol[A, B, C, R]):
    def __call__(self, a: A, b: B, c: C) -> R: ...


@runtime_checkable
class TriFunctionWithException(Protocol[A, B, C, R]):
    def __call__(self, a: A, b: B, c: C) -> R: ...


@runtime_checkable
class QuadFunction(Protocol[A, B, C, D, R]):
    def __call__(self, a: A, b: B, c: C, d: D) -> R: ...


@runtime_checkable
class QuadFunctionWithException(Protocol[A, B, C, D, R]):
    def __call__(self, a: A, b: B, c: C, d: D) -> R: ...

# -----------------------------------------------------------------------------
# CONSUMERS
# -----------------------------------------------------------------------------

@runtime_checkable
class ConsumerWithException(Protocol[A]):
    def __call__(self, a: A) -> None: ...


@runtime_checkable
class BiConsumerWithException(Protocol[A, B]):
    def __call__(self, a: A, b: B) -> None: ...


@runtime_checkable
class TriConsumer(Protocol[A, B, C]):
    def __call__(self, a: A, b: B, c: C) -> None: ...


@runtime_checkable
class TriConsumerWithException(Protocol[A, B, C]):
    def __call__(self, a: A, b: B, c: C) -> None: ...


@runtime_checkable
class QuadConsumerWithException(Protocol[A, B, C, D]):
    def __call__(self, a: A, b: B, c: C, d: D) -> None: ...
