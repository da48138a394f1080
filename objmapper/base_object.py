import logging
from typing import Any, Callable, Dict, Optional, Sequence, Type, TypeVar

from .common import MISSED, Json
from .exceptions import InvalidFieldError
from .fields import FieldInfo, all_declared_properties, get_fields
from .naming import candidate_keys
from .parsers import (
    PARSER_EXCEPTIONS, parse_array, parse_boolean, parse_float, parse_int,
    parse_object, parse_string, resolve_key,
)
from .property_type import PropertyType
from .schema import DEFAULT_SCHEMA, NestedErrors, Schema, merge_schema
from .serializers import get_complex_serializer

logger = logging.getLogger(__name__)

B = TypeVar("B", bound="BaseObject")


def get_own_value(obj: Any, name: str) -> Any:
    return vars(obj).get(name, MISSED)


class BaseObject:
    """
    Base class for objects hydrated from plain JSON-like data.

    Declare fields as class attributes holding `PropertyType` descriptors::

        class Image(BaseObject):
            _height = PropertyType.integer(map_both="h")
            _title = PropertyType.string(delete_if_undefined=True)

    Instances are built from raw data on construction
    and rendered back with `to_json()`.
    Per-type options are set with `__schema__ = Schema(...)`.
    """
    __schema__: Optional[Schema] = None
    __properties__: Dict[str, PropertyType] = {}
    __fields__: Sequence[FieldInfo] = ()
    __merged_schema__: Schema = DEFAULT_SCHEMA
    __serializer__: Callable[[Any, Dict[str, str]], Dict[str, Json]] = staticmethod(  # type: ignore
        get_complex_serializer((), get_own_value, MISSED),
    )

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        properties = all_declared_properties(cls)
        for name in properties:
            if isinstance(vars(cls).get(name), PropertyType):
                delattr(cls, name)

        schema = merge_schema(
            *(vars(klass).get("__schema__") for klass in cls.__mro__),
            DEFAULT_SCHEMA,
        )
        cls.__properties__ = properties
        cls.__merged_schema__ = schema
        cls.__fields__ = get_fields(cls, schema, properties)
        cls.__serializer__ = staticmethod(  # type: ignore
            get_complex_serializer(cls.__fields__, get_own_value, MISSED),
        )

    def __init__(self, json: Any = None):
        self.__json = json
        self.__output_keys: Dict[str, str] = {}
        self.build()

    @classmethod
    def from_json(cls: Type[B], json: Any) -> B:
        """Create instance from plain data"""
        return cls(json)

    def build(self) -> None:
        """
        Fill declared fields from raw data.
        Fields that resolve to nothing and have no default are deleted
        """
        for field in self.__fields__:
            prop = field.prop
            if prop.map_to:
                self.__output_keys[field.field_name] = prop.map_to

            raw_value = resolve_key(self.__json, field.data_names)
            if prop.cls is None:
                value = field.parser(raw_value, prop.init())
            else:
                value = self._parse_nested(field, raw_value)

            if value is MISSED:
                vars(self).pop(field.field_name, None)
                continue
            if prop.set_with is not None and value is not None:
                value = prop.set_with(value)
            setattr(self, field.setter_name or field.field_name, value)

    def _parse_nested(self, field: FieldInfo, raw_value: Any) -> Any:
        strict = self.__merged_schema__.nested_errors is NestedErrors.RAISE
        try:
            return field.parser(raw_value, field.prop.init())
        except InvalidFieldError as e:
            e._append_path(field.field_name)
            if strict:
                raise
            self._log_nested_error(field)
        except PARSER_EXCEPTIONS as e:
            if strict:
                raise InvalidFieldError(str(e), [field.field_name]) from e
            self._log_nested_error(field)
        return field.prop.init()

    def _log_nested_error(self, field: FieldInfo) -> None:
        logger.warning(
            "Cannot build field `%s` of %s, default is used",
            field.field_name, type(self).__qualname__,
            exc_info=True,
        )

    def to_json(self) -> Dict[str, Json]:
        """Render built fields as plain data using output names"""
        return self.__serializer__(self, self.__output_keys)

    def get(self, key: str, default: Any = None) -> Any:
        """Raw value by key, trying both internal and public spelling"""
        prefix = self.__merged_schema__.internal_prefix
        return resolve_key(self.__json, candidate_keys(key, prefix), default)

    def get_string(self, key: str, default: Any = None) -> Any:
        return parse_string(self.get(key), default)

    def get_int(self, key: str, default: Any = None) -> Any:
        return parse_int(self.get(key), default)

    def get_float(self, key: str, default: Any = None) -> Any:
        return parse_float(self.get(key), default)

    def get_boolean(self, key: str, default: Any = None) -> Any:
        return parse_boolean(self.get(key), default)

    def get_array(self, key: str, default: Any = None) -> Any:
        return parse_array(self.get(key), default)

    def get_object(self, key: str, default: Any = None) -> Any:
        return parse_object(self.get(key), default)

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_json().items())
        return f"{type(self).__qualname__}({fields})"
