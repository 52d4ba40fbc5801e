"""CEF escaping rules.

Header fields and extension fields use different delimiters, so each has its
own table. ``str.translate`` substitutes every character in one pass, which
means a backslash introduced by one replacement is never escaped again.
"""

from __future__ import annotations

_HEADER_TABLE = str.maketrans(
    {
        "\\": "\\\\",
        "|": "\\|",
        "\n": "\\n",
    }
)

_EXTENSION_TABLE = str.maketrans(
    {
        "\\": "\\\\",
        "\n": "\\n",
        "=": "\\=",
    }
)


def escape_header_field(value: str) -> str:
    """Escape backslash, pipe and newline for use in a CEF header field."""
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value.translate(_HEADER_TABLE)


def escape_extension_field(value: str) -> str:
    """Escape backslash, newline and equals sign for an extension key or value."""
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value.translate(_EXTENSION_TABLE)
