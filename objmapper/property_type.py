from copy import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Type

from .common import MISSED, SetHook


class Kind(Enum):
    INTEGER = "int"
    FLOAT = "float"
    BOOLEAN = "bool"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    MAP = "map"


KIND_DEFAULTS: Dict[Kind, Any] = {
    Kind.INTEGER: 0,
    Kind.FLOAT: 0.0,
    Kind.BOOLEAN: False,
    Kind.STRING: None,
    Kind.ARRAY: [],
    Kind.OBJECT: None,
    Kind.MAP: None,
}


def get_default_by_kind(kind: Kind) -> Any:
    return copy(KIND_DEFAULTS.get(kind))


def to_flag(value: Any) -> bool:
    if value == "false":
        return False
    return bool(value)


@dataclass(frozen=True)
class PropertyType:
    """
    Immutable description of a single declared field.

    Use one of the kind constructors (`PropertyType.integer()`,
    `PropertyType.array(cls=Image)` and so on) instead of calling
    the class directly: they resolve option shortcuts and synthesize defaults.
    """
    kind: Kind
    default: Any = MISSED
    map_from: Optional[str] = None
    map_to: Optional[str] = None
    cls: Optional[Type] = None
    delete_if_undefined: bool = False
    use_setter_on_init: bool = True
    set_with: Optional[SetHook] = field(default=None, compare=False)

    @classmethod
    def create(
        klass,
        kind: Kind,
        default: Any = MISSED,
        map_from: Optional[str] = None,
        map_to: Optional[str] = None,
        map_both: Optional[str] = None,
        cls_: Optional[Type] = None,
        delete_if_undefined: Any = False,
        use_setter_on_init: Optional[bool] = None,
        set_with: Optional[SetHook] = None,
    ) -> "PropertyType":
        """

        :param default: value used when nothing can be resolved from data
        :param map_from: key to read from raw data instead of the field name
        :param map_to: key to write on serialization instead of the field name
        :param map_both: shortcut for equal `map_from` and `map_to`
        :param cls_: nested object type for `object` and `array` kinds
        :param delete_if_undefined: remove field when no value is resolved
                                    and no `default` is given
        :param use_setter_on_init: assign value through a property setter
                                   with the same name if the class has one
        :param set_with: hook applied to every coerced value
        """
        if map_both is not None:
            map_from = map_to = map_both
        if not callable(set_with):
            set_with = None
        if set_with is not None:
            use_setter_on_init = False
        elif use_setter_on_init is None:
            use_setter_on_init = True
        delete_if_undefined = to_flag(delete_if_undefined)
        if default is MISSED and not delete_if_undefined:
            default = get_default_by_kind(kind)
        return klass(
            kind=kind,
            default=default,
            map_from=map_from,
            map_to=map_to,
            cls=cls_,
            delete_if_undefined=delete_if_undefined,
            use_setter_on_init=bool(use_setter_on_init),
            set_with=set_with,
        )

    @classmethod
    def integer(klass, **options) -> "PropertyType":
        return klass._of_kind(Kind.INTEGER, options)

    @classmethod
    def float(klass, **options) -> "PropertyType":
        return klass._of_kind(Kind.FLOAT, options)

    @classmethod
    def boolean(klass, **options) -> "PropertyType":
        return klass._of_kind(Kind.BOOLEAN, options)

    @classmethod
    def string(klass, **options) -> "PropertyType":
        return klass._of_kind(Kind.STRING, options)

    @classmethod
    def object(klass, **options) -> "PropertyType":
        return klass._of_kind(Kind.OBJECT, options)

    @classmethod
    def array(klass, **options) -> "PropertyType":
        return klass._of_kind(Kind.ARRAY, options)

    @classmethod
    def map(klass, **options) -> "PropertyType":
        return klass._of_kind(Kind.MAP, options)

    @classmethod
    def _of_kind(klass, kind: Kind, options: Dict[str, Any]) -> "PropertyType":
        # `cls` arrives as an option, `create` takes it as `cls_`
        if "cls" in options:
            options["cls_"] = options.pop("cls")
        return klass.create(kind, **options)

    def init(self) -> Any:
        """Fresh copy of the default value"""
        return copy(self.default)
