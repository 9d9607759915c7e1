"""
Env - dotenv loading with typed value coercion.

Key behaviors:
- Variables already present in the environment are never overridden
- ``true``/``false``/``empty``/``null`` (optionally parenthesized) are coerced
- Matching surrounding quotes are stripped
- Callable defaults are only called when the key is missing
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

_KEYWORDS: dict[str, Any] = {
    "true": True,
    "(true)": True,
    "false": False,
    "(false)": False,
    "empty": "",
    "(empty)": "",
    "null": None,
    "(null)": None,
}

_QUOTED = re.compile(r"\A(['\"])(.*)\1\Z", re.DOTALL)


def coerce_value(value: str) -> Any:
    """Coerce a raw environment string to its typed value."""
    lowered = value.lower()
    if lowered in _KEYWORDS:
        return _KEYWORDS[lowered]

    match = _QUOTED.match(value)
    if match is not None:
        return match.group(2)

    return value


class Env:
    """
    Environment variable repository backed by a dotenv file.

    Writes go to ``environ`` (``os.environ`` by default) but only for keys
    that are not set yet.
    """

    def __init__(self, environ: MutableMapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self, path: str | Path, filename: str = ".env") -> dict[str, str | None]:
        """
        Load variables from ``{path}/{filename}``.

        Returns:
            The variables parsed from the file, as written there.
        """
        self._loaded = True
        dotenv_path = Path(path) / filename

        values = dotenv_values(dotenv_path)
        if not values:
            logger.debug("No variables loaded from %s", dotenv_path)

        for key, value in values.items():
            if value is not None and key not in self._environ:
                self._environ[key] = value

        return dict(values)

    def get(self, key: str, default: Any = None) -> Any:
        value = self._environ.get(key)

        if value is None:
            return default() if callable(default) else default

        return coerce_value(value)
