"""Typed verdict container for explicit pass/fail validation returns.

Motivation
----------
Validation never raises on bad input; callers branch on a value instead.
This module provides a minimal `Verdict[T]` with two variants:
- `Passed(value)` carrying the normalized document,
- `Failed(errors)` carrying the complete, ordered list of error messages.

The variants also expose the `success` / `data` / `errors` trio so the API
layer can serialize a verdict straight into ``{"success": ..., ...}``.

Example
-------
>>> from citeguard.core.result import passed, failed
>>> passed(42).success
True
>>> failed(["title: Title is required"]).errors
('title: Title is required',)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

T = TypeVar("T")


class Verdict(Generic[T]):
    """Sum type representing either `Passed[T]` or `Failed`."""

    # ----- Introspection -----------------------------------------------------
    @property
    def success(self) -> bool:
        """Return ``True`` if this is a :class:`Passed` verdict."""
        return isinstance(self, Passed)

    @property
    def data(self) -> T | None:
        """Return the normalized value, or ``None`` when failed."""
        if isinstance(self, Passed):
            return cast(Passed[T], self).value
        return None

    @property
    def errors(self) -> tuple[str, ...]:
        """Return the error messages (empty when passed)."""
        if isinstance(self, Failed):
            return self.messages
        return ()

    # ----- Unwraps -----------------------------------------------------------
    def unwrap(self) -> T:
        """Return the value if ``Passed``, else raise ``RuntimeError``."""
        if isinstance(self, Passed):
            return cast(Passed[T], self).value
        raise RuntimeError(f"Attempted to unwrap Failed: {self!r}")

    # ----- Combinators -------------------------------------------------------
    def with_errors(self, extra: Iterable[str]) -> Verdict[T]:
        """Append ``extra`` errors, turning a pass into a failure if any exist."""
        more = tuple(extra)
        if not more:
            return self
        return Failed(self.errors + more)

    def to_dict(self) -> dict[str, Any]:
        """Serialize into the ``{success, data | errors}`` wire shape."""
        if isinstance(self, Passed):
            value = cast(Passed[T], self).value
            dump = getattr(value, "model_dump", None)
            payload = dump(mode="json", by_alias=True) if callable(dump) else value
            return {"success": True, "data": payload}
        return {"success": False, "errors": list(self.errors)}

    # ----- Dunder helpers ----------------------------------------------------
    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        if isinstance(self, Passed):
            return f"Passed({cast(Passed[T], self).value!r})"
        if isinstance(self, Failed):
            return f"Failed({list(self.messages)!r})"
        return "Verdict(?)"


@dataclass(frozen=True, repr=False)
class Passed(Verdict[T]):
    """Successful verdict wrapping a value of type ``T``."""

    value: T


@dataclass(frozen=True, repr=False)
class Failed(Verdict[T]):
    """Failed verdict wrapping a non-empty tuple of error messages."""

    messages: tuple[str, ...]


# ----- Convenience constructors ----------------------------------------------
def passed(value: T) -> Verdict[T]:
    """Construct :class:`Passed` with better type inference at call sites."""
    return Passed(value)


def failed(errors: Iterable[str]) -> Verdict[T]:
    """Construct :class:`Failed` from any iterable of messages."""
    return Failed(tuple(errors))


__all__ = ["Verdict", "Passed", "Failed", "passed", "failed"]
