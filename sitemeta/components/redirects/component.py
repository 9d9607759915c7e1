"""
Redirects component - configured redirect resolution.

Resolution never fails the request: a failing target is reported in the
output and the caller serves the error page.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ._impl import RedirectRouter
from .models import RedirectTarget, RedirectValidationError, ResolveOutput, ResolveRedirectInput

logger = logging.getLogger(__name__)


def run_resolve(
    inp: ResolveRedirectInput,
    *,
    redirects: Mapping[str, RedirectTarget] | RedirectRouter,
) -> ResolveOutput:
    """
    Resolve a path against the redirect rules.

    Args:
        inp: Input containing the request path.
        redirects: Configured mapping or an already compiled router.

    Returns:
        ResolveOutput with the target, or no target when the error page
        should be served.
    """
    router = redirects if isinstance(redirects, RedirectRouter) else RedirectRouter(redirects)

    try:
        target = router.resolve(inp.path)
    except Exception as e:
        logger.warning("Redirect resolution failed for %s", inp.path, exc_info=True)
        return ResolveOutput(
            target=None,
            errors=[
                RedirectValidationError(
                    code="redirect_failed",
                    message=str(e) or type(e).__name__,
                    field="path",
                )
            ],
            success=False,
        )

    return ResolveOutput(target=target)


def run(
    inp: ResolveRedirectInput,
    *,
    redirects: Mapping[str, RedirectTarget] | RedirectRouter,
) -> ResolveOutput:
    """
    Main entry point for the redirects component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ResolveRedirectInput):
        return run_resolve(inp, redirects=redirects)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
