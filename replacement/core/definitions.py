# replacement/core/definitions.py

"""Value kind constants for the JSON value model."""


class ValueKind:
    """Constants naming the kinds of a decoded JSON value."""

    # Primitives
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"

    # Containers
    ARRAY = "array"
    OBJECT = "object"

    # Anything outside the JSON model (tuples, sets, custom objects)
    OTHER = "other"

    CONTAINERS = frozenset({ARRAY, OBJECT})
