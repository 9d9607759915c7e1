"""
RedirectRouter - static from→to redirects with pattern placeholders.

Patterns are matched against the request path without surrounding slashes.
Placeholders:
- ``(:any)``: one path segment
- ``(:num)``: an integer segment
- ``(:alpha)``: letters only
- ``(:alphanum)``: letters and digits
- ``(:all)``: the rest of the path, slashes included
Raw regex groups are accepted as well.

Key behaviors:
- Rules are evaluated in declaration order, first match wins
- ``$N`` in a target is replaced by the N-th capture
- Callable targets receive the captures and return the target
- ``go`` never raises: failures fall back to the error page
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import TypeVar

from sitemeta.core.errors import ConfigurationError

from .models import RedirectRule, RedirectTarget

logger = logging.getLogger(__name__)

T = TypeVar("T")

PLACEHOLDERS: dict[str, str] = {
    "(:any)": r"([a-zA-Z0-9\.\-_%= \+\@\(\)]+)",
    "(:num)": r"(-?[0-9]+)",
    "(:alpha)": r"([a-zA-Z]+)",
    "(:alphanum)": r"([a-zA-Z0-9]+)",
    "(:all)": r"(.*)",
}


def normalize_path(path: str | None) -> str:
    """Strip surrounding slashes; the root path becomes an empty string."""
    if not path:
        return ""
    return path.strip("/")


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a redirect pattern into an anchored regex."""
    expression = normalize_path(pattern)
    for placeholder, regex in PLACEHOLDERS.items():
        expression = expression.replace(placeholder, regex)
    try:
        return re.compile(f"^{expression}$")
    except re.error as e:
        raise ConfigurationError("redirects", f"has an invalid pattern {pattern!r}: {e}") from e


def fill_placeholders(target: str, captures: tuple[str, ...]) -> str:
    """Substitute ``$N`` placeholders, highest index first so ``$10`` survives ``$1``."""
    for index in range(len(captures), 0, -1):
        target = target.replace(f"${index}", captures[index - 1])
    return target


def to_url(target: str, base_url: str) -> str:
    """Make a relative target absolute against the site URL."""
    if "://" in target or target.startswith("//"):
        return target
    return f"{base_url.rstrip('/')}/{target.lstrip('/')}"


def compile_rules(redirects: Mapping[str, RedirectTarget]) -> list[RedirectRule]:
    return [
        RedirectRule(pattern=pattern, target=target, regex=compile_pattern(pattern))
        for pattern, target in redirects.items()
    ]


class RedirectRouter:
    """Ordered redirect rules compiled from configuration."""

    def __init__(self, redirects: Mapping[str, RedirectTarget] | None = None) -> None:
        self._rules = compile_rules(redirects or {})

    @property
    def rules(self) -> list[RedirectRule]:
        return list(self._rules)

    def match(self, path: str | None) -> tuple[RedirectRule, tuple[str, ...]] | None:
        normalized = normalize_path(path)
        for rule in self._rules:
            match = rule.regex.match(normalized)
            if match is not None:
                captures = tuple(group or "" for group in match.groups())
                return rule, captures
        return None

    def resolve(self, path: str | None) -> str | None:
        """
        Resolve the redirect target for a path.

        Returns:
            The target URL, or None when no rule matches.

        Raises:
            TypeError: If a callable target does not return a string.
            Any exception raised by a callable target.
        """
        found = self.match(path)
        if found is None:
            return None

        rule, captures = found
        target = rule.target
        if callable(target):
            target = target(*captures)
            if not isinstance(target, str):
                raise TypeError(
                    f"Redirect target for {rule.pattern!r} must be a string, "
                    f"got {type(target).__name__}"
                )

        return fill_placeholders(target, captures)

    def go(self, path: str | None, error_page: T) -> str | T:
        """
        Resolve a path, falling back to the error page.

        Unmatched paths and failing targets both yield ``error_page``.
        """
        try:
            target = self.resolve(path)
        except Exception:
            logger.warning("Redirect resolution failed for %s", path, exc_info=True)
            return error_page

        if target is None:
            return error_page

        logger.debug("Redirecting %s to %s", path, target)
        return target


# --- Factory ---


def create_redirect_router(
    redirects: Mapping[str, RedirectTarget] | None = None,
) -> RedirectRouter:
    """Create a RedirectRouter."""
    return RedirectRouter(redirects)
