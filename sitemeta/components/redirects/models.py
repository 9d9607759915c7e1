"""
Redirects component input/output models.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field

RedirectTarget = str | Callable[..., str]


@dataclass(frozen=True)
class RedirectRule:
    """Compiled from→to mapping entry."""

    pattern: str
    target: RedirectTarget
    regex: re.Pattern[str] = field(compare=False, repr=False)


# --- Input Models ---


@dataclass(frozen=True)
class ResolveRedirectInput:
    """Input for resolving a path against the redirect rules."""

    path: str


# --- Output Models ---


@dataclass(frozen=True)
class RedirectValidationError:
    """Redirect resolution error."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class ResolveOutput:
    """Output from resolving a redirect."""

    target: str | None
    errors: list[RedirectValidationError] = field(default_factory=list)
    success: bool = True

    @property
    def is_error_page(self) -> bool:
        return self.target is None
