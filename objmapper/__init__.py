from .base_object import BaseObject
from .common import MISSED
from .exceptions import InvalidFieldError
from .naming import candidate_keys
from .parsers import resolve_key
from .property_type import Kind, PropertyType
from .schema import NestedErrors, Schema
