"""Canonical tnetstring type tags.

These byte values are fixed by the format and shared with every other
tnetstring implementation.
"""

from __future__ import annotations

NULL = b"~"
BOOLEAN = b"!"
INTEGER = b"#"
FLOAT = b"^"
STRING = b","
LIST = b"]"
MAPPING = b"}"

LENGTH_SEPARATOR = b":"

# Value kind -> tag byte
TAG_FOR_KIND: dict[str, bytes] = {
    "null": NULL,
    "boolean": BOOLEAN,
    "integer": INTEGER,
    "float": FLOAT,
    "string": STRING,
    "list": LIST,
    "mapping": MAPPING,
}

# Tag byte (as int) -> value kind
KIND_FOR_TAG: dict[int, str] = {tag[0]: kind for kind, tag in TAG_FOR_KIND.items()}

TRUE = b"true"
FALSE = b"false"
