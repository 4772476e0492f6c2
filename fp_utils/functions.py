from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar, overload

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")
H = TypeVar("H")


@overload
def pipe(value: A) -> A:
    ...


@overload
def pipe(value: A, fn1: Callable[[A], B]) -> B:
    ...


@overload
def pipe(value: A, fn1: Callable[[A], B], fn2: Callable[[B], C]) -> C:
    ...


@overload
def pipe(
    value: A, fn1: Callable[[A], B], fn2: Callable[[B], C], fn3: Callable[[C], D]
) -> D:
    ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
) -> E:
    ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
) -> F:
    ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
) -> G:
    ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
) -> H:
    ...


@overload
def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    ...


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """
    Threads `value` through `fns` left to right, each function gets the
    previous result. With no functions the value is returned unchanged.

    Example: pipe(5, lambda x: x * 2, lambda x: x + 1, str) -> "11"

    NOTE: the overloads type chains up to 7 steps, longer chains still run
          but are typed as `Any`.
    """
    return reduce(lambda acc, fn: fn(acc), fns, value)


def compose(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """Right to left composition: compose(f, g)(x) == f(g(x))"""

    def _composed(a: A) -> C:
        return f(g(a))

    return _composed


def identity(a: A) -> A:
    return a


def constant(a: A) -> Callable[[], A]:
    def _constant() -> A:
        return a

    return _constant


def flip(f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    def _flipped(b: B, a: A) -> C:
        return f(a, b)

    return _flipped


def curry(f: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """
    Turns a two argument function into a chain of unary ones, handy for
    partially applying the first argument in a `pipe`.

    Example: curry(operator.add)(2)(3) -> 5
    """

    def _curried(a: A) -> Callable[[B], C]:
        def _applied(b: B) -> C:
            return f(a, b)

        return _applied

    return _curried


def uncurry(f: Callable[[A], Callable[[B], C]]) -> Callable[[A, B], C]:
    """Inverse of `curry`."""

    def _uncurried(a: A, b: B) -> C:
        return f(a)(b)

    return _uncurried
