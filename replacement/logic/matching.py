# replacement/logic/matching.py

"""Value classification and target matching for JSON values."""

from typing import Any

from replacement.core.definitions import ValueKind


def kind_of(value: Any) -> str:
    """Classifies a decoded JSON value.

    ``bool`` is checked before ``int`` since it subclasses it.

    Args:
        value: Any Python value

    Returns:
        ValueKind constant for the value
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    return ValueKind.OTHER


def is_container(value: Any) -> bool:
    """Returns True for arrays and objects."""
    return isinstance(value, (list, dict))


def values_match(value: Any, target: Any) -> bool:
    """Checks whether ``value`` should be replaced when searching for ``target``.

    Containers match by identity only. Primitives match when they are of the
    same kind and compare equal, so ``True`` never matches ``1`` and NaN never
    matches itself.

    Args:
        value: Candidate value found in the payload
        target: Value being searched for

    Returns:
        True if the candidate is an occurrence of the target
    """
    if is_container(value) or is_container(target):
        return value is target

    if kind_of(value) != kind_of(target):
        return False

    return bool(value == target)
