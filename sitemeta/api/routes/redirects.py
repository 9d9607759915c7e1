"""
Redirect fallback route.

Registered after every other route: it only sees requests nothing else
handled.

Key behaviors:
- Matching paths answer 307 with the resolved target, made absolute
- Unmatched paths and failing targets answer 404 with the error page
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from sitemeta.api.deps import get_context
from sitemeta.components.redirects import to_url
from sitemeta.context import SiteContext

router = APIRouter()

REDIRECT_STATUS_CODE = 307


@router.get("/{path:path}", include_in_schema=False)
def handle_redirect(path: str, context: SiteContext = Depends(get_context)) -> Response:
    target = context.redirects().go(path, None)

    if target is None:
        return HTMLResponse(content=context.site.error_page(), status_code=404)

    return RedirectResponse(
        url=to_url(target, context.site.url()),
        status_code=REDIRECT_STATUS_CODE,
    )
