from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Type

from .common import Parser
from .naming import candidate_keys, strip_prefix
from .parsers import get_nested_parser, get_parser
from .property_type import PropertyType
from .schema import Schema


@dataclass(frozen=True)
class FieldInfo:
    field_name: str
    prop: PropertyType
    data_names: Tuple[str, ...]
    output_name: str
    setter_name: Optional[str]
    parser: Parser


def all_declared_properties(cls: Type) -> Dict[str, PropertyType]:
    """
    Collect descriptors declared on `cls` and its bases.
    Parents go first, redeclared fields keep the parent position
    """
    properties: Dict[str, PropertyType] = {}
    for base in reversed(cls.__bases__):
        properties.update(getattr(base, "__properties__", {}))
    properties.update(
        (name, value)
        for name, value in vars(cls).items()
        if isinstance(value, PropertyType)
    )
    return properties


def find_setter(cls: Type, name: str) -> Optional[str]:
    attr = getattr(cls, name, None)
    if isinstance(attr, property) and attr.fset is not None:
        return name
    return None


def get_parser_for(prop: PropertyType) -> Parser:
    if prop.cls is not None:
        return get_nested_parser(prop.kind, prop.cls)
    return get_parser(prop.kind)


def make_field_info(cls: Type, schema: Schema, field_name: str, prop: PropertyType) -> FieldInfo:
    json_key = strip_prefix(field_name, schema.internal_prefix)
    if prop.map_from:
        data_names: Tuple[str, ...] = (prop.map_from,)
    else:
        data_names = candidate_keys(json_key, schema.internal_prefix)

    setter_name = None
    if prop.use_setter_on_init and json_key != field_name:
        setter_name = find_setter(cls, json_key)

    return FieldInfo(
        field_name=field_name,
        prop=prop,
        data_names=data_names,
        output_name=json_key,
        setter_name=setter_name,
        parser=get_parser_for(prop),
    )


def get_fields(cls: Type, schema: Schema, properties: Dict[str, Any]) -> Sequence[FieldInfo]:
    return tuple(
        make_field_info(cls, schema, name, prop)
        for name, prop in properties.items()
    )
