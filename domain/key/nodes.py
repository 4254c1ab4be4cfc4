"""Closed classification of parsed JSON values."""

from enum import Enum


class JsonKind(str, Enum):
    """The six kinds of value a JSON parser can produce."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    NUMBER = "number"


def kind_of(value: object) -> JsonKind:
    """
    Classify a value produced by json.load().

    Examples:
        >>> kind_of(True)
        <JsonKind.BOOLEAN: 'boolean'>
        >>> kind_of([1, 2]).value
        'array'

    Raises:
        TypeError: If the value is not something a JSON parser returns
    """
    if value is None:
        return JsonKind.NULL
    # bool is a subclass of int; test it first
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")
