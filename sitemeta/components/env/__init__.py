"""
Env component - dotenv loading and typed lookups.
"""

from ._impl import Env, coerce_value

__all__ = [
    "Env",
    "coerce_value",
]
