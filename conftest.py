from collections.abc import Callable
from typing import Any

import pytest
from _pytest.config import Config
from typing_extensions import TypedDict

from fp_utils import PydanticSchema


def pytest_configure(config: Config) -> None:
    config.addinivalue_line(
        "markers", "laws: algebraic law checks for Option, Either and pipe"
    )


class CallCounter:
    """Wraps a function and counts how many times it was called"""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def __call__(self, fn: Callable[..., Any]) -> Callable[..., Any]:
        def counted(*args: Any) -> Any:
            self.calls.append(args)
            return fn(*args)

        return counted

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def call_counter() -> CallCounter:
    return CallCounter()


class User(TypedDict):
    id: int
    name: str


@pytest.fixture
def user_schema() -> PydanticSchema[User]:
    return PydanticSchema(User)
