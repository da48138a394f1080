from typing import Any, Callable, Dict, Sequence

from .common import Json
from .fields import FieldInfo


def dump_value(value: Any) -> Json:
    """Render hydrated value as plain data, nested objects use their `to_json`"""
    to_json = getattr(value, "to_json", None)
    if callable(to_json) and not isinstance(value, type):
        return to_json()
    if isinstance(value, (list, tuple)):
        return [dump_value(x) for x in value]
    if isinstance(value, dict):
        return {k: dump_value(v) for k, v in value.items()}
    return value


def get_complex_serializer(
    fields: Sequence[FieldInfo],
    getter: Callable[[Any, str], Any],
    missing: Any,
) -> Callable[[Any, Dict[str, str]], Dict[str, Json]]:
    """
    :param getter: function used to get field value from object
    :param missing: value returned by getter for absent fields, such fields are omitted
    """
    field_info = tuple((f.field_name, f.output_name) for f in fields)

    def complex_serialize(data, renames):
        container = {}
        for field_name, output_name in field_info:
            value = getter(data, field_name)
            if value is missing:
                continue
            container[renames.get(field_name, output_name)] = dump_value(value)
        return container

    return complex_serialize
