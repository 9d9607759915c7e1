"""
Redirects component - pattern redirects with error page fallback.
"""

from ._impl import (
    PLACEHOLDERS,
    RedirectRouter,
    compile_pattern,
    compile_rules,
    create_redirect_router,
    fill_placeholders,
    normalize_path,
    to_url,
)
from .component import run, run_resolve
from .models import (
    RedirectRule,
    RedirectTarget,
    RedirectValidationError,
    ResolveOutput,
    ResolveRedirectInput,
)

__all__ = [
    # Entry points
    "run",
    "run_resolve",
    # Models
    "RedirectRule",
    "RedirectTarget",
    "RedirectValidationError",
    "ResolveOutput",
    "ResolveRedirectInput",
    # Router
    "RedirectRouter",
    "create_redirect_router",
    # Functions
    "compile_pattern",
    "compile_rules",
    "fill_placeholders",
    "normalize_path",
    "to_url",
    # Constants
    "PLACEHOLDERS",
]
