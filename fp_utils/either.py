from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeGuard, TypeVar

A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")
F = TypeVar("F")


class Either(Generic[E, A], Iterable[A]):
    """
    Represents a value of one of two possible types (a disjoint union).

    By convention `Left` holds a failure and `Right` holds a success. Use the
    `left` and `right` constructors and the curried functions below instead of
    touching the variants directly:

    ```
    pipe(
        right(4),
        flat_map_either(lambda x: right(x * 2) if x > 0 else left("negative")),
        match_either(lambda e: f"error: {e}", str),
    ) -> "8"
    ```
    """

    __slots__ = ()

    def __len__(self) -> int:
        return 1 if isinstance(self, Right) else 0

    def __bool__(self) -> bool:
        return True if isinstance(self, Right) else False

    def __iter__(self) -> Iterator[A]:
        return iter([self.value]) if isinstance(self, Right) else iter([])


@dataclass(frozen=True)
class Right(Either[Any, A]):
    value: A


@dataclass(frozen=True)
class Left(Either[E, Any]):
    value: E


def left(error: E) -> Either[E, Any]:
    return Left(error)


def right(value: A) -> Either[Any, A]:
    return Right(value)


def is_left(either: Either[E, A]) -> TypeGuard[Left[E]]:
    return isinstance(either, Left)


def is_right(either: Either[E, A]) -> TypeGuard[Right[A]]:
    return isinstance(either, Right)


def map_either(f: Callable[[A], B]) -> Callable[[Either[E, A]], Either[E, B]]:
    """Transforms the success value, a `Left` is returned as is."""

    def _map(either: Either[E, A]) -> Either[E, B]:
        return right(f(either.value)) if is_right(either) else either  # type: ignore[return-value]

    return _map


def map_left(f: Callable[[E], F]) -> Callable[[Either[E, A]], Either[F, A]]:
    """Transforms the error value, a `Right` is returned as is."""

    def _map(either: Either[E, A]) -> Either[F, A]:
        return left(f(either.value)) if is_left(either) else either  # type: ignore[return-value]

    return _map


def flat_map_either(
    f: Callable[[A], Either[E, B]]
) -> Callable[[Either[E, A]], Either[E, B]]:
    """
    Chains a step that can fail. The first `Left` in a chain short-circuits
    the rest: `f` is not called and that same `Left` is returned.
    """

    def _flat_map(either: Either[E, A]) -> Either[E, B]:
        return f(either.value) if is_right(either) else either  # type: ignore[return-value]

    return _flat_map


def get_or_else_either(fallback: A) -> Callable[[Either[Any, A]], A]:
    def _get(either: Either[Any, A]) -> A:
        return either.value if is_right(either) else fallback

    return _get


def get_or_else_lazy_either(fallback: Callable[[E], A]) -> Callable[[Either[E, A]], A]:
    """Like `get_or_else_either`, but computes the fallback from the error."""

    def _get(either: Either[E, A]) -> A:
        return either.value if is_right(either) else fallback(either.value)  # type: ignore[union-attr]

    return _get


def match_either(
    on_left: Callable[[E], B], on_right: Callable[[A], B]
) -> Callable[[Either[E, A]], B]:
    def _match(either: Either[E, A]) -> B:
        if is_right(either):
            return on_right(either.value)
        return on_left(either.value)  # type: ignore[attr-defined]

    return _match
