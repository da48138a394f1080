from typing import Tuple

INTERNAL_PREFIX = "_"


def strip_prefix(name: str, prefix: str = INTERNAL_PREFIX) -> str:
    if prefix and name.startswith(prefix):
        return name[len(prefix):]
    return name


def toggle_prefix(name: str, prefix: str = INTERNAL_PREFIX) -> str:
    if not prefix:
        return name
    if name.startswith(prefix):
        return name[len(prefix):]
    return f"{prefix}{name}"


def candidate_keys(name: str, prefix: str = INTERNAL_PREFIX) -> Tuple[str, ...]:
    """
    Keys to look up in raw data for `name`, in priority order:
    the name itself, then the name with the internal prefix toggled
    """
    toggled = toggle_prefix(name, prefix)
    if toggled == name:
        return (name,)
    return name, toggled
