"""
Bridges schema validation into `Option` and `Either`.

Any object with a `safe_parse(value) -> Result` method can be used as a
schema, `PydanticSchema` provides one for everything pydantic can validate.
The `parse_*` functions never raise on invalid input, they differ only in how
much of the validation error survives:

- `parse_option` drops it (`none`)
- `parse_either` keeps the `ValidationError` as is (`left(error)`)
- `parse_either_message` keeps it as a single readable string
"""
import logging
from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from fp_utils.either import Either, left, right
from fp_utils.functions import pipe
from fp_utils.option import Option, flat_map, from_nullable, none, some
from fp_utils.result import Failure, Result, attempt

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class SafeParser(Protocol[T_co]):
    def safe_parse(self, value: Any) -> Result[T_co]:
        ...


class PydanticSchema(Generic[T]):
    """
    Schema backed by a pydantic `TypeAdapter`.

    Args:
        tp:
            The type to validate against: a `BaseModel` subclass, a `TypedDict`,
            a dataclass, or any other type pydantic supports.
        strict:
            Disables pydantic's type coercion (e.g. "1" is no longer accepted
            for an int field).
    """

    def __init__(self, tp: type[T] | Any, strict: bool = False):
        self.tp = tp
        self.strict = strict
        self._adapter: TypeAdapter[T] = TypeAdapter(tp)

    def validate(self, value: Any) -> T:
        return self._adapter.validate_python(value, strict=self.strict)

    def safe_parse(self, value: Any) -> Result[T]:
        return attempt(self.validate, value, catch=ValidationError)

    def __repr__(self) -> str:
        name = getattr(self.tp, "__name__", repr(self.tp))
        return f"PydanticSchema({name}, strict={self.strict})"


def format_issues(
    error: ValidationError,
    issue_separator: str = ", ",
    path_separator: str = ".",
) -> str:
    """
    Formats every issue of `error` as "<dotted.path>: <message>" and joins
    them into one string.

    Example: "id: Input should be a valid integer, name: Field required"
    """
    return issue_separator.join(
        f"{path_separator.join(str(p) for p in issue['loc'])}: {issue['msg']}"
        for issue in error.errors()
    )


def _log_failure(schema: SafeParser[Any], result: Failure) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        error = result.error
        n = error.error_count() if isinstance(error, ValidationError) else 1
        logger.debug(f"Validation against {schema!r} failed with {n} issue(s)")


def parse_option(schema: SafeParser[T], value: Any) -> Option[T]:
    result = schema.safe_parse(value)
    if result.success:
        return some(result.data)  # type: ignore[attr-defined]
    _log_failure(schema, result)  # type: ignore[arg-type]
    return none


def parse_either(schema: SafeParser[T], value: Any) -> Either[ValidationError, T]:
    result = schema.safe_parse(value)
    if result.success:
        return right(result.data)  # type: ignore[attr-defined]
    _log_failure(schema, result)  # type: ignore[arg-type]
    return left(result.error)  # type: ignore[attr-defined]


def parse_either_message(schema: SafeParser[T], value: Any) -> Either[str, T]:
    result = schema.safe_parse(value)
    if result.success:
        return right(result.data)  # type: ignore[attr-defined]
    _log_failure(schema, result)  # type: ignore[arg-type]
    error = result.error  # type: ignore[attr-defined]
    return left(
        format_issues(error) if isinstance(error, ValidationError) else str(error)
    )


def create_option_validator(schema: SafeParser[T]) -> Callable[[Any], Option[T]]:
    """
    Binds `schema` into a reusable validator:

    ```
    parse_user = create_option_validator(PydanticSchema(User))
    parse_user({"id": 1, "name": "Alice"}) -> some(User(id=1, name="Alice"))
    ```
    """

    def _validate(value: Any) -> Option[T]:
        return parse_option(schema, value)

    return _validate


def create_either_validator(
    schema: SafeParser[T],
) -> Callable[[Any], Either[ValidationError, T]]:
    def _validate(value: Any) -> Either[ValidationError, T]:
        return parse_either(schema, value)

    return _validate


def parse_nullable_option(schema: SafeParser[T], value: Any) -> Option[T]:
    """
    `none` for a `None` input, otherwise `parse_option`. The two cases are
    indistinguishable in the result.
    """
    return pipe(
        from_nullable(value),
        flat_map(lambda v: parse_option(schema, v)),
    )
