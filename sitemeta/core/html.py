"""HTML/XML serialization primitives shared by the renderers."""

from __future__ import annotations

import html
from typing import Any

VOID_TAGS = frozenset({"meta", "link", "img", "br", "hr", "input"})


def escape(text: Any) -> str:
    """Escape HTML/XML special characters, quotes included."""
    return html.escape(attr_value(text), quote=True)


def attr_value(value: Any) -> str:
    """Stringify an attribute value (booleans as ``true``/``false``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def tag(name: str, attrs: dict[str, Any] | None = None, content: str | None = None) -> str:
    """
    Serialize a single HTML tag.

    Attributes with a ``None`` value are dropped. Void tags never get a
    closing tag; other tags are closed even when ``content`` is empty.
    """
    parts = [name]
    for key, value in (attrs or {}).items():
        if value is None:
            continue
        parts.append(f'{key}="{escape(value)}"')

    opening = "<" + " ".join(parts) + ">"
    if name in VOID_TAGS:
        return opening
    return f"{opening}{content or ''}</{name}>"
