from fp_utils.either import (
    Either,
    Left,
    Right,
    flat_map_either,
    get_or_else_either,
    get_or_else_lazy_either,
    is_left,
    is_right,
    left,
    map_either,
    map_left,
    match_either,
    right,
)
from fp_utils.functions import compose, constant, curry, flip, identity, pipe, uncurry
from fp_utils.option import (
    Nothing,
    Option,
    Some,
    flat_map,
    from_nullable,
    get_or_else,
    get_or_else_lazy,
    is_none,
    is_some,
    map,
    match,
    none,
    some,
)
from fp_utils.result import Failure, Result, Success, attempt
from fp_utils.validation import (
    PydanticSchema,
    SafeParser,
    create_either_validator,
    create_option_validator,
    format_issues,
    parse_either,
    parse_either_message,
    parse_nullable_option,
    parse_option,
)

__all__ = [
    # option
    "Option",
    "Some",
    "Nothing",
    "some",
    "none",
    "is_some",
    "is_none",
    "from_nullable",
    "map",
    "flat_map",
    "get_or_else",
    "get_or_else_lazy",
    "match",
    # either
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    "is_left",
    "is_right",
    "map_either",
    "map_left",
    "flat_map_either",
    "get_or_else_either",
    "get_or_else_lazy_either",
    "match_either",
    # functions
    "pipe",
    "compose",
    "identity",
    "constant",
    "curry",
    "uncurry",
    "flip",
    # result
    "Result",
    "Success",
    "Failure",
    "attempt",
    # validation
    "SafeParser",
    "PydanticSchema",
    "parse_option",
    "parse_either",
    "parse_either_message",
    "create_option_validator",
    "create_either_validator",
    "parse_nullable_option",
    "format_issues",
]
