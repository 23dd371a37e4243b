"""Conversion between tnetstring values and plain Python objects.

This module maps the seven value variants onto the Python types most callers
already work with: ``None``, ``bool``, ``int``, ``float``, ``bytes``/``str``,
``list`` and ``dict``.

Conversion Rules:
-----------------
- ``str`` is encoded as UTF-8 and becomes a String
- ``bytes``, ``bytearray`` and ``memoryview`` become a String unchanged
- ``list`` and ``tuple`` become a List
- ``dict`` becomes a Mapping in insertion order; keys must be ``str`` or ``bytes``
- Value instances pass through untouched

Going back, a Mapping becomes a ``dict`` (a later duplicate key overwrites an
earlier one) and a String stays ``bytes`` unless ``text=True`` is requested.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ..exceptions import EncodeError, FormatError
from .values import VALUE_TYPES, Boolean, Float, Integer, List, Mapping, Null, String, Value


def from_python(obj: Any) -> Value:
    """Build a Value tree from a plain Python object.

    Args:
        obj: Object to convert

    Returns:
        Equivalent Value

    Raises:
        EncodeError: If the object (or anything nested in it) has no tnetstring form

    Example:
        >>> from_python({"id": 7, "tags": ["a", None]})
        Mapping(pairs=((b'id', Integer(value=7)), (b'tags', List(items=(String(value=b'a'), Null())))))
    """
    if isinstance(obj, VALUE_TYPES):
        return obj
    if obj is None:
        return Null()
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, int):
        try:
            return Integer(obj)
        except ValidationError as e:
            raise EncodeError(f"Cannot encode integer: {e}") from e
    if isinstance(obj, float):
        try:
            return Float(obj)
        except ValidationError as e:
            raise EncodeError(f"Cannot encode float {obj!r}: no tnetstring form") from e
    if isinstance(obj, str):
        return String(obj.encode("utf-8"))
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return String(obj)
    if isinstance(obj, (list, tuple)):
        return List([from_python(item) for item in obj])
    if isinstance(obj, dict):
        pairs = []
        for key, item in obj.items():
            if isinstance(key, str):
                key = key.encode("utf-8")
            elif not isinstance(key, (bytes, bytearray, memoryview)):
                raise EncodeError(
                    f"Mapping keys must be str or bytes, got {type(key).__name__}: {key!r}"
                )
            pairs.append((bytes(key), from_python(item)))
        return Mapping(pairs)

    raise EncodeError(f"Object type not supported: {type(obj).__name__}")


def to_python(value: Value, *, text: bool = False) -> Any:
    """Convert a Value tree into plain Python objects.

    Args:
        value: Value to convert
        text: If True, decode every String (mapping keys included) as UTF-8 ``str``

    Returns:
        None, bool, int, float, bytes/str, list or dict

    Raises:
        FormatError: If ``text=True`` and a String is not valid UTF-8
    """
    if isinstance(value, Null):
        return None
    if isinstance(value, (Boolean, Integer, Float)):
        return value.value
    if isinstance(value, String):
        return _text(value.value) if text else value.value
    if isinstance(value, List):
        return [to_python(item, text=text) for item in value.items]
    if isinstance(value, Mapping):
        result: dict[Any, Any] = {}
        for key, item in value.pairs:
            result[_text(key) if text else key] = to_python(item, text=text)
        return result

    raise TypeError(f"Expected a tnetstring Value, got {type(value).__name__}")


def _text(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FormatError(
            "String is not valid UTF-8", offset=e.start, expected="UTF-8 text", found=raw
        ) from e
