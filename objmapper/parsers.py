import math
import re
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Optional

from .common import MISSED, Parser, T
from .exceptions import InvalidFieldError
from .property_type import Kind

INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))")

PARSER_EXCEPTIONS = (ValueError, TypeError, AttributeError, LookupError)


def resolve_key(data: Any, candidates: Iterable[str], default: Any = None) -> Any:
    """
    Return value of the first candidate key found in `data`.
    Anything but a mapping has no keys at all
    """
    if not isinstance(data, Mapping):
        return default
    for key in candidates:
        if key in data:
            return data[key]
    return default


def to_int(value: Any) -> Optional[int]:
    """Integer parsing with `parseInt` leniency, None means `not a number`"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value):
            return int(value)
        return None
    if isinstance(value, str):
        match = INT_PREFIX.match(value)
        if match:
            try:
                return int(match.group(1))
            except ValueError:  # too many digits to convert
                return None
    return None


def to_float(value: Any) -> Optional[float]:
    """Float parsing with `parseFloat` leniency, None means `not a number`"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        if math.isnan(value):
            return None
        return value
    if isinstance(value, str):
        match = FLOAT_PREFIX.match(value)
        if match:
            return float(match.group(1).replace("Infinity", "inf"))
    return None


def parse_string(value: Any, default: Any) -> Any:
    if value is None:
        return default
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_int(value: Any, default: Any) -> Any:
    if value is None:
        return default
    res = to_int(value)
    if res is None:
        return default
    return res


def parse_float(value: Any, default: Any) -> Any:
    if value is None:
        return default
    res = to_float(value)
    if res is None:
        return default
    return res


def parse_boolean(value: Any, default: Any) -> Any:
    if value is None:
        return default
    if value == "false":
        return False
    return bool(value)


def parse_array(value: Any, default: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return list(value)
    return default


def parse_object(value: Any, default: Any) -> Any:
    if isinstance(value, Mapping):
        return value
    return default


def parse_stub(value: Any, default: Any) -> Any:
    return default


PARSERS: Dict[Kind, Parser] = {
    Kind.STRING: parse_string,
    Kind.INTEGER: parse_int,
    Kind.FLOAT: parse_float,
    Kind.BOOLEAN: parse_boolean,
    Kind.ARRAY: parse_array,
    Kind.OBJECT: parse_object,
    Kind.MAP: parse_stub,
}


def get_parser(kind: Kind) -> Parser:
    return PARSERS[kind]


def get_element_parser(parser: Callable[[Any], T], key: Any) -> Callable[[Any], T]:
    def element_parser(data: Any) -> T:
        try:
            return parser(data)
        except InvalidFieldError as e:
            e._append_path(str(key))
            raise
        except PARSER_EXCEPTIONS as e:
            raise InvalidFieldError(str(e), [str(key)])

    return element_parser


def get_nested_parser(kind: Kind, cls: Callable[[Any], Any]) -> Parser:
    if kind is Kind.ARRAY:
        def array_parser(value, default):
            items = parse_array(value, default)
            if not isinstance(items, list):
                return items
            return [
                get_element_parser(cls, i)(item)
                for i, item in enumerate(items)
            ]

        return array_parser
    if kind is Kind.OBJECT:
        def object_parser(value, default):
            data = parse_object(value, default)
            if data is MISSED:
                return MISSED
            return cls(data)

        return object_parser
    return get_parser(kind)
