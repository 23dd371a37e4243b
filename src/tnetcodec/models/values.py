"""Immutable value model for tnetstrings.

Each of the seven tnetstring types is a frozen Pydantic model carrying a
``kind`` literal, and :data:`Value` is the discriminated union over them.
Every variant takes its single field positionally::

    >>> from tnetcodec.models import Integer, List, Mapping, String
    >>> List([Integer(1), String(b"two")])
    List(items=(Integer(value=1), String(value=b'two')))
    >>> Mapping([(b"id", Integer(7))]).get(b"id")
    Integer(value=7)
"""

from __future__ import annotations

import math
import sys
from typing import Annotated, Any, Iterator, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator


class _Node(BaseModel):
    """Shared configuration for all value variants."""

    model_config = ConfigDict(
        # Values are immutable once built
        frozen=True,
        extra="forbid",
    )


class Null(_Node):
    """The null value (``0:~``)."""

    kind: Literal["null"] = Field(default="null", repr=False)


class Boolean(_Node):
    """A boolean (``4:true!`` / ``5:false!``)."""

    kind: Literal["boolean"] = Field(default="boolean", repr=False)
    value: StrictBool

    def __init__(self, value: bool, **data: Any) -> None:
        super().__init__(value=value, **data)


class Integer(_Node):
    """A signed integer.

    Size is bounded only by the interpreter's limit on int to decimal string
    conversion (``sys.get_int_max_str_digits()``), so every Integer can be
    encoded and read back.
    """

    kind: Literal["integer"] = Field(default="integer", repr=False)
    value: StrictInt

    def __init__(self, value: int, **data: Any) -> None:
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def _check_digits(cls, v: int) -> int:
        # 0 means the interpreter has no limit
        max_digits = getattr(sys, "get_int_max_str_digits", lambda: 0)()
        # 2**(3*n) < 10**n, so short values skip the exact comparison
        if max_digits and abs(v).bit_length() > 3 * max_digits and abs(v) >= 10**max_digits:
            raise ValueError(
                f"integer has more than {max_digits} decimal digits and cannot be encoded"
            )
        return v


class Float(_Node):
    """A finite floating point number.

    Integers are widened to float. Booleans, strings, infinities and NaN are
    rejected because the wire format has no spelling for them.
    """

    kind: Literal["float"] = Field(default="float", repr=False)
    value: float = Field(allow_inf_nan=False)

    def __init__(self, value: float, **data: Any) -> None:
        super().__init__(value=value, **data)

    @field_validator("value", mode="before")
    @classmethod
    def _widen_number(cls, v: Any) -> float:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(f"expected a number, got {type(v).__name__}")
        try:
            result = float(v)
        except OverflowError as e:
            raise ValueError(f"integer too large for a float: {e}") from e
        if not math.isfinite(result):
            raise ValueError(f"non-finite float {result!r} has no tnetstring form")
        return result


def _as_bytes(v: Any) -> bytes:
    if isinstance(v, bytes):
        return v
    if isinstance(v, (bytearray, memoryview)):
        return bytes(v)
    raise ValueError(f"expected bytes, got {type(v).__name__}")


class String(_Node):
    """An arbitrary byte string. No text encoding is implied."""

    kind: Literal["string"] = Field(default="string", repr=False)
    value: bytes

    def __init__(self, value: bytes, **data: Any) -> None:
        super().__init__(value=value, **data)

    @field_validator("value", mode="before")
    @classmethod
    def _copy_buffer(cls, v: Any) -> bytes:
        return _as_bytes(v)


class List(_Node):
    """An ordered sequence of values.

    ``len()`` counts the items, so an empty List is falsy. Test for a list
    with ``isinstance(value, List)``, not ``if value:``.
    """

    kind: Literal["list"] = Field(default="list", repr=False)
    items: Tuple[Value, ...] = ()

    def __init__(self, items: Any = (), **data: Any) -> None:
        super().__init__(items=items, **data)

    def __len__(self) -> int:
        return len(self.items)


class Mapping(_Node):
    """An ordered sequence of (key, value) pairs.

    Keys are byte strings. Pairs keep their wire order and duplicate keys are
    preserved as-is; lookups return the first match.

    ``len()`` counts the pairs, so an empty Mapping is falsy like an empty
    dict.
    """

    kind: Literal["mapping"] = Field(default="mapping", repr=False)
    pairs: Tuple[Tuple[bytes, Value], ...] = ()

    def __init__(self, pairs: Any = (), **data: Any) -> None:
        super().__init__(pairs=pairs, **data)

    @field_validator("pairs", mode="before")
    @classmethod
    def _normalize_pairs(cls, v: Any) -> Any:
        if isinstance(v, dict):
            v = list(v.items())
        normalized = []
        for pair in v:
            if not isinstance(pair, (tuple, list)) or len(pair) != 2:
                raise ValueError(f"expected (key, value) pair, got {pair!r}")
            key, item = pair
            if isinstance(key, String):
                key = key.value
            normalized.append((_as_bytes(key), item))
        return normalized

    def __len__(self) -> int:
        return len(self.pairs)

    def keys(self) -> Iterator[bytes]:
        """Iterate keys in wire order (duplicates included)."""
        return (key for key, _ in self.pairs)

    def get(self, key: bytes, default: Optional[Value] = None) -> Optional[Value]:
        """Return the value of the first pair whose key equals ``key``."""
        for candidate, item in self.pairs:
            if candidate == key:
                return item
        return default


Value = Annotated[
    Union[Null, Boolean, Integer, Float, String, List, Mapping],
    Field(discriminator="kind"),
]

VALUE_TYPES = (Null, Boolean, Integer, Float, String, List, Mapping)

List.model_rebuild()
Mapping.model_rebuild()
