from enum import Enum
from typing import Optional, cast


class NestedErrors(Enum):
    """What to do when a nested object cannot be built"""
    LOG = "log"
    RAISE = "raise"


class Schema:
    """
    Class describing per-type conversion options.

    Unset options (`None`) are taken from schemas of parent classes
    and finally from `DEFAULT_SCHEMA`.
    In case of inheriting you can set any setting as a class field.
    """

    def __init__(
        self,
        internal_prefix: Optional[str] = None,
        nested_errors: Optional[NestedErrors] = None,
    ):
        if internal_prefix is not None or not hasattr(self, "internal_prefix"):
            self.internal_prefix = internal_prefix
        if nested_errors is not None or not hasattr(self, "nested_errors"):
            self.nested_errors = nested_errors


SCHEMA_FIELDS = {
    "internal_prefix",
    "nested_errors",
}


class SchemaProxy:
    """Read-only view over several schemas, the first set option wins"""
    __slots__ = ("_schemas",)

    def __init__(self, *schemas: Schema):
        self._schemas = schemas

    def __getattr__(self, item):
        for schema in self._schemas:
            res = getattr(schema, item, None)
            if res is not None:
                return res

        if item in SCHEMA_FIELDS:
            return None

        raise AttributeError(f"Field `{item}` is not defined for Schema")


def merge_schema(*schemas: Optional[Schema]) -> Schema:
    return cast(Schema, SchemaProxy(*[s for s in schemas if s]))


DEFAULT_SCHEMA = Schema(
    internal_prefix="_",
    nested_errors=NestedErrors.LOG,
)
