# safeptr

Small wrapper types, all in `safeptr.ptr`, that make it explicit whether a
reference may be empty, whether its holder owns what it refers to, and
whether it only borrows it. `None` stands for the empty reference.

- `MaybeNull(target=None)` holds a reference that may be `None`. To use the
  target, ask for it in a checked form:
  - `as_optional_not_null()` returns a `StrictNotNull`, or `None` when empty;
  - `as_variant_not_null()` returns the same pair of outcomes;
  - `visit(handle_nullptr, handle_not_null)` calls `handle_nullptr(None)` or
    `handle_not_null(StrictNotNull(...))` and returns what the handler returns.

  `get()` and `deref()` still exist but issue a `DeprecationWarning`;
  `deref()` raises `NullptrError` when the reference is empty.
- `StrictNotNull(target)` can never be empty; building one from `None` (or
  from a wrapper that holds `None`) raises `NullptrError`. `deref()` returns
  the referred object.
- `Owner(target=None)` marks a reference whose holder is responsible for the
  target. `as_borrower()` hands out a `Borrower` of the same object. Building
  an `Owner` from a `Borrower` raises `TypeError`.
- `Borrower(target=None)` marks a reference that only borrows its target. It
  can be built from another `Borrower` or from an `Owner`.
- `make_maybe_null(target)`, `make_borrower(target)` and `make_owner(target)`
  are shorthand constructors; `make_borrower` given an `Owner` returns its
  `as_borrower()`.
- `NullptrError(message="")` is the exception raised on use of an empty
  reference; its string form is the message.

Every wrapper has `get()`, returning the wrapped reference. Wrappers compare
by the identity of the object they refer to, against each other and against
bare objects or `None`, looking through nested wrappers: a `Borrower` of a
`StrictNotNull` equals a plain `Borrower` of the same object. Ordering uses
the object's `id()`, with `None` first. A wrapper is truthy when it refers to
something, hashes by the same key, and its `str()` is that key in
hexadecimal.

Ownership is a marker only: the wrappers never copy, free or otherwise manage
the objects they refer to.

## Installation

```
pip install safeptr
```

## Example

```python
from safeptr.ptr import MaybeNull, NullptrError, StrictNotNull, make_borrower, make_owner

maybe = MaybeNull(None)
print(maybe.visit(lambda _: "empty", lambda p: p.deref()))   # empty

data = [1, 2, 3]
maybe = MaybeNull(data)
not_null = maybe.as_optional_not_null()
print(not_null.deref())                                      # [1, 2, 3]

try:
    StrictNotNull(None)
except NullptrError:
    print("refused")

owner = make_owner(data)
borrower = owner.as_borrower()
assert borrower == owner
assert make_borrower(data).get() is data
```

## Running the tests

```
pip install -e ".[test]"
pytest
```