"""Plain-object convenience API.

``dumps``/``loads`` work directly with ``None``, ``bool``, ``int``, ``float``,
``str``/``bytes``, ``list`` and ``dict`` for callers that do not need the
typed value model.
"""

from __future__ import annotations

from typing import Any

from ..exceptions import FormatError
from ..models.convert import from_python, to_python
from .decoder import Buffer, decode
from .encoder import encode
from .limits import DecodeLimits


def dumps(obj: Any) -> bytes:
    """Encode a plain Python object as a tnetstring.

    Args:
        obj: Object to encode (see :func:`tnetcodec.models.from_python`)

    Returns:
        Encoded bytes

    Raises:
        EncodeError: If the object has no tnetstring form

    Example:
        >>> dumps({"a": [1, 2]})
        b'15:1:a,8:1:1#1:2#]}'
    """
    return encode(from_python(obj))


def loads(data: Buffer, *, text: bool = False, limits: DecodeLimits | None = None) -> Any:
    """Decode exactly one tnetstring into plain Python objects.

    Args:
        data: Bytes holding a single unit and nothing else
        text: If True, return strings as ``str`` instead of ``bytes``
        limits: Optional decoder limits

    Returns:
        Decoded object

    Raises:
        FormatError: If data is malformed or has trailing bytes

    Example:
        >>> loads(b"15:1:a,8:1:1#1:2#]}", text=True)
        {'a': [1, 2]}
    """
    value, rest = decode(data, limits=limits)
    if rest:
        raise FormatError(
            "Trailing data after tnetstring",
            offset=len(data) - len(rest),
            expected="end of input",
            found=rest[:16],
        )
    return to_python(value, text=text)
