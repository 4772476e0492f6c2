"""
Option: a value that may be absent, in place of bare `None` checks.

An `Option[A]` is either `Some(value)` or the single empty value `none`.
Transformations are curried so they read left to right inside `pipe`:

```
pipe(
    from_nullable(users.get(user_id)),
    flat_map(lambda user: from_nullable(user.email)),
    map(str.lower),
    get_or_else("unknown"),
)
```

NOTE: `map` and `match` shadow the builtin `map` and the `match` soft keyword
when star-imported, prefer `from fp_utils import option` and qualified access
in modules that also need the builtin.
"""
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeGuard, TypeVar

A = TypeVar("A")
B = TypeVar("B")


class Option(Generic[A], Iterable[A]):
    """Represents a value that may or may not exist"""

    __slots__ = ()

    def __len__(self) -> int:
        return 1 if isinstance(self, Some) else 0

    def __bool__(self) -> bool:
        return True if isinstance(self, Some) else False

    def __iter__(self) -> Iterator[A]:
        return iter([self.value]) if isinstance(self, Some) else iter([])


@dataclass(frozen=True)
class Some(Option[A]):
    value: A


class Nothing(Option[Any]):
    """The absent value. There is exactly one instance: `none`."""

    __slots__ = ()
    _instance: "Nothing | None" = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "none"


none: Option[Any] = Nothing()


def some(value: A) -> Option[A]:
    return Some(value)


def is_some(option: Option[A]) -> TypeGuard[Some[A]]:
    return isinstance(option, Some)


def is_none(option: Option[A]) -> TypeGuard[Nothing]:
    return isinstance(option, Nothing)


def from_nullable(value: A | None) -> Option[A]:
    """
    `none` for `None`, `some(value)` for everything else. Falsy values such as
    0, "", False or NaN are present values.
    """
    return none if value is None else some(value)


def map(f: Callable[[A], B]) -> Callable[[Option[A]], Option[B]]:
    """
    Applies `f` to a present value. For an `f` that itself returns an Option
    use `flat_map`, otherwise the result is nested.
    """

    def _map(option: Option[A]) -> Option[B]:
        return some(f(option.value)) if is_some(option) else none

    return _map


def flat_map(f: Callable[[A], Option[B]]) -> Callable[[Option[A]], Option[B]]:
    def _flat_map(option: Option[A]) -> Option[B]:
        return f(option.value) if is_some(option) else none

    return _flat_map


def get_or_else(fallback: A) -> Callable[[Option[A]], A]:
    def _get(option: Option[A]) -> A:
        return option.value if is_some(option) else fallback

    return _get


def get_or_else_lazy(fallback: Callable[[], A]) -> Callable[[Option[A]], A]:
    """Like `get_or_else`, but `fallback` is only called when the value is absent."""

    def _get(option: Option[A]) -> A:
        return option.value if is_some(option) else fallback()

    return _get


def match(
    on_none: Callable[[], B], on_some: Callable[[A], B]
) -> Callable[[Option[A]], B]:
    def _match(option: Option[A]) -> B:
        return on_some(option.value) if is_some(option) else on_none()

    return _match
