"""
Site Routing Middleware for tldserve

Resolves the Host header of each request to a site directory.
"""
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from tldserve.services.site_resolver import resolve_site


def raw_request_uri(request: Request) -> str:
    """Rebuild the request target as sent by the client."""
    raw_path = request.scope.get("raw_path")
    uri = raw_path.decode("utf-8", errors="replace") if raw_path else request.url.path

    query = request.scope.get("query_string", b"")
    if query:
        uri += "?" + query.decode("latin-1")
    return uri


class SiteMiddleware(BaseHTTPMiddleware):
    """Middleware that attaches the resolved site to each request."""

    async def dispatch(self, request: Request, call_next):
        host = request.headers.get("host", "localhost")
        site_config = request.app.state.site_config

        # Directory scans hit the filesystem, keep them off the event loop
        site = await run_in_threadpool(
            resolve_site, host, raw_request_uri(request), site_config
        )

        request.state.site = site

        return await call_next(request)
