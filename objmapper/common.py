from typing import Any, Callable, Dict, List, TypeVar, Union

T = TypeVar("T")

Json = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

Parser = Callable[[Any, Any], Any]
SetHook = Callable[[Any], Any]


class _Missed:
    __slots__ = ()

    def __repr__(self):
        return "MISSED"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


MISSED: Any = _Missed()  # value is absent, field must be deleted
