from __future__ import annotations

import json
import re
from typing import Any, Iterable

Attributes = Iterable[tuple[str, Any]]

# Not allowed anywhere in an XML 1.0 document (tab, LF and CR are).
_XML_INVALID = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def to_str(value: Any) -> str:
    """
    Render a property value the way it appears in a stylesheet.

    2.0 -> "2", True -> "true", None -> "null", [1, 2] -> "1,2".
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None else to_str(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def encode(value: Any) -> str:
    s = _XML_INVALID.sub("", "" if value is None else to_str(value))
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def text(value: Any, *, escape: bool = True) -> str:
    return encode(value) if escape else to_str(value)


def attr(attributes: Attributes | None, *, escape: bool = True) -> str:
    pairs = list(attributes or ())
    if not pairs:
        return ""
    return " " + " ".join(f'{k}="{text(v, escape=escape)}"' for k, v in pairs)


def tag_close(el: str, attributes: Attributes | None = None, *, escape: bool = True) -> str:
    return f"<{el}{attr(attributes, escape=escape)}/>"


def tag(
    el: str,
    contents: str,
    attributes: Attributes | None = None,
    *,
    escape: bool = True,
) -> str:
    # `contents` is inner markup and is never escaped here; use text() for leaf values.
    return f"<{el}{attr(attributes, escape=escape)}>{contents}</{el}>"
