"""Wrappers that make the nullability and ownership of a reference explicit.

A wrapped "pointer" is any object reference, with ``None`` standing for the
null pointer.  Wrappers compare by the identity of what they point at, so two
wrappers are equal exactly when they refer to the same object.  Comparisons
see through nested wrappers, so a borrower of a strict-not-null reference
compares equal to a plain borrower of the same object.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Optional, TypeVar

__all__ = [
    "NullptrError",
    "WrappedPointer",
    "StrictNotNull",
    "MaybeNull",
    "Borrower",
    "Owner",
    "make_maybe_null",
    "make_borrower",
    "make_owner",
]

R = TypeVar("R")


class NullptrError(Exception):
    """Raised when a null reference is used where a value is required."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def _address(value: Any) -> Any:
    """Return the innermost object that ``value`` refers to."""
    while isinstance(value, WrappedPointer):
        value = value._target
    return value


def _key(value: Any) -> int:
    """Return an ordering key for ``value``; the null reference orders first."""
    target = _address(value)
    return 0 if target is None else id(target)


class WrappedPointer:
    """A reference to a single object that compares by identity."""

    __slots__ = ("_target",)

    def __init__(self, target: Any = None) -> None:
        self._target = target

    def get(self) -> Any:
        """Return the wrapped reference."""
        return self._target

    def __eq__(self, other: object) -> bool:
        return _address(self) is _address(other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: object) -> bool:
        return _key(self) < _key(other)

    def __le__(self, other: object) -> bool:
        return _key(self) <= _key(other)

    def __gt__(self, other: object) -> bool:
        return _key(self) > _key(other)

    def __ge__(self, other: object) -> bool:
        return _key(self) >= _key(other)

    def __hash__(self) -> int:
        return hash(_key(self))

    def __bool__(self) -> bool:
        return _address(self) is not None

    def __str__(self) -> str:
        return hex(_key(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"


class StrictNotNull(WrappedPointer):
    """A reference that can never be null."""

    __slots__ = ()

    def __init__(self, target: Any) -> None:
        if _address(target) is None:
            raise NullptrError()
        super().__init__(target)

    def deref(self) -> Any:
        """Return the object referred to."""
        return _address(self)


class MaybeNull(WrappedPointer):
    """A reference that may be null and must be checked before use."""

    __slots__ = ()

    def __init__(self, target: Any = None) -> None:
        if isinstance(target, MaybeNull):
            target = target._target
        super().__init__(target)

    def as_optional_not_null(self) -> Optional[StrictNotNull]:
        """Return a not-null reference, or ``None`` when this one is null."""
        if _address(self) is None:
            return None
        return StrictNotNull(self._target)

    def as_variant_not_null(self) -> Optional[StrictNotNull]:
        """Return either ``None`` or a not-null reference."""
        return self.as_optional_not_null()

    def visit(
        self,
        handle_nullptr: Callable[[None], R],
        handle_not_null: Callable[[StrictNotNull], R],
    ) -> R:
        """Call the handler matching the state of the reference."""
        if _address(self) is None:
            return handle_nullptr(None)
        return handle_not_null(StrictNotNull(self._target))

    def get(self) -> Any:
        """Return the raw reference without a null check (deprecated)."""
        warnings.warn(
            "MaybeNull.get is deprecated; use as_optional_not_null or visit",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._target

    def deref(self) -> Any:
        """Return the object referred to, raising if null (deprecated)."""
        warnings.warn(
            "MaybeNull.deref is deprecated; use as_optional_not_null or visit",
            DeprecationWarning,
            stacklevel=2,
        )
        target = _address(self)
        if target is None:
            raise NullptrError()
        return target


class Borrower(WrappedPointer):
    """A reference to an object that someone else is responsible for."""

    __slots__ = ()

    def __init__(self, target: Any = None) -> None:
        if isinstance(target, (Borrower, Owner)):
            target = target._target
        super().__init__(target)

    def deref(self) -> Any:
        """Return the object referred to."""
        return _address(self)


class Owner(WrappedPointer):
    """A reference whose holder is responsible for the object."""

    __slots__ = ()

    def __init__(self, target: Any = None) -> None:
        if isinstance(target, Borrower):
            raise TypeError("cannot create an owner from a borrower")
        if isinstance(target, Owner):
            target = target._target
        super().__init__(target)

    def deref(self) -> Any:
        """Return the object referred to."""
        return _address(self)

    def as_borrower(self) -> Borrower:
        """Return a borrower of the owned object."""
        return Borrower(self._target)


def make_maybe_null(target: Any) -> MaybeNull:
    """Wrap ``target`` in a :class:`MaybeNull`."""
    return MaybeNull(target)


def make_borrower(target: Any) -> Borrower:
    """Wrap ``target`` in a :class:`Borrower`."""
    if isinstance(target, Owner):
        return target.as_borrower()
    return Borrower(target)


def make_owner(target: Any) -> Owner:
    """Wrap ``target`` in an :class:`Owner`."""
    return Owner(target)