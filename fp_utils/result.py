from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from fp_utils.either import Either, Left, Right

T = TypeVar("T")
U = TypeVar("U")


class Result(Either[tuple[Any, Exception], U]):
    """
    Outcome of a call that may raise, kept as data. This is the shape schema
    objects return from `safe_parse`: `Success` carries the produced value,
    `Failure` carries the input and the exception that was raised for it.
    """

    __slots__ = ()

    @property
    def success(self) -> bool:
        return isinstance(self, Success)


@dataclass(frozen=True)
class Success(Right[U], Result[U]):
    @property
    def data(self) -> U:
        return self.value


@dataclass(frozen=True, init=False)
class Failure(Left[tuple[Any, Exception]], Result[Any]):
    def __init__(self, input: Any, exception: Exception):
        object.__setattr__(self, "value", (input, exception))

    @property
    def exception(self) -> Exception:
        return self.value[1]

    @property
    def error(self) -> Exception:
        return self.exception

    @property
    def input(self) -> Any:
        return self.value[0]


def attempt(
    fn: Callable[[T], U],
    input: T,
    catch: type[Exception] | tuple[type[Exception], ...] = Exception,
) -> Result[U]:
    """
    Calls `fn(input)`, returning `Success` with its return value, or `Failure`
    if it raised one of the `catch` exceptions. Anything else propagates.
    """
    try:
        return Success(fn(input))
    except catch as e:
        return Failure(input, e)
