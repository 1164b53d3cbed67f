"""
Routes for tldserve

Internal endpoints live under /_tldserve/, everything else is served from
the site directory resolved by SiteMiddleware.
"""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import FileResponse, HTMLResponse

from tldserve.models.response import HealthResponse, ResolutionResponse
from tldserve.services.directory_listing import list_directory
from tldserve.services.error_pages import render_not_found
from tldserve.services.request_uri import extract_path
from tldserve.services.site_resolver import ResolvedSite, resolve_site, site_name

router = APIRouter()

INTERNAL_PREFIX = "/_tldserve"
INDEX_FILES = ("index.html", "index.htm")


async def not_found() -> HTMLResponse:
    return HTMLResponse(content=await render_not_found(), status_code=404)


def site_target(site: ResolvedSite) -> Optional[Path]:
    """Filesystem path for the request URI, or None if it leaves the site."""
    try:
        root = Path(site.path).resolve()
        target = (root / site.uri.lstrip("/")).resolve()
    except (OSError, ValueError):
        # Embedded NUL bytes and other unusable paths
        return None

    if target != root and root not in target.parents:
        return None
    return target


@router.get(f"{INTERNAL_PREFIX}/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Health check endpoint."""
    site_config = request.app.state.site_config
    return HealthResponse(tld=site_config.tld, paths=list(site_config.paths))


@router.get(f"{INTERNAL_PREFIX}/resolve", response_model=ResolutionResponse)
def resolve_host(
    request: Request,
    host: str = Query(..., description="Host to resolve"),
    uri: str = Query("/", description="Raw request URI")
):
    """Show which directory would serve a host."""
    site_config = request.app.state.site_config
    site = resolve_site(host, uri, site_config)

    if site is None:
        return ResolutionResponse(
            host=host,
            site_name=site_name(host, site_config),
            uri=extract_path(uri),
            found=False
        )

    return ResolutionResponse(
        host=host,
        site_name=site.name,
        uri=site.uri,
        path=site.path,
        is_default=site.is_default,
        found=True
    )


@router.api_route("/{path:path}", methods=["GET", "HEAD"])
async def serve_site(request: Request, path: str):
    """Serve a file, index page or directory listing from the resolved site."""
    site = getattr(request.state, "site", None)
    if site is None:
        return await not_found()

    target = site_target(site)
    if target is None:
        return await not_found()

    if target.is_file():
        return FileResponse(path=target)

    if target.is_dir():
        for index in INDEX_FILES:
            if (target / index).is_file():
                return FileResponse(path=target / index)

        if request.app.state.settings.directory_listing:
            listing = list_directory(site.path, site.uri)
            if listing is not None:
                return HTMLResponse(content=listing)

    return await not_found()
