"""
Meta component models.

A Field is the result of resolving one metadata key for a page.
"""

from __future__ import annotations

from collections.abc import Mapping, Sized
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .ports import ImagePort, PagePort


def is_empty_value(value: Any) -> bool:
    """
    Check whether a raw value counts as empty.

    ``None``, ``""`` and empty collections are empty. ``False``, ``0`` and
    ``"0"`` are values, not absence.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (bool, int, float)):
        return False
    if isinstance(value, Sized):
        return len(value) == 0
    return False


@dataclass(frozen=True)
class Field:
    """
    Resolved metadata field.

    Carries the page it was resolved against, the lowercase key and a
    possibly absent value.
    """

    page: PagePort | None = field(compare=False, repr=False)
    key: str
    value: Any = None
    exists: bool = True

    def is_empty(self) -> bool:
        return is_empty_value(self.value)

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def or_(self, fallback: Any) -> Field:
        """Return this field, or a field holding ``fallback`` when empty."""
        if self.is_not_empty():
            return self
        if isinstance(fallback, Field):
            return fallback
        return Field(self.page, self.key, fallback)

    def value_or(self, fallback: Any) -> Any:
        return self.or_(fallback).value

    def as_mapping(self) -> dict[str, Any]:
        """Return the value as a dict, or an empty dict for non-mappings."""
        if isinstance(self.value, Mapping):
            return dict(self.value)
        return {}

    def to_file(self) -> ImagePort | None:
        """
        Resolve the value to an image of the page.

        Accepts an image object, a filename, or a list whose first item is
        either of those.
        """
        value = self.value
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        if is_empty_value(value):
            return None
        if hasattr(value, "resize"):
            return value  # type: ignore[no-any-return]
        if isinstance(value, str) and self.page is not None:
            return self.page.file(value)
        return None

    def __str__(self) -> str:
        if self.value is None:
            return ""
        return str(self.value)
