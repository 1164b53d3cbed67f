"""
tldserve - Main Application

Serves project directories on <name>.<tld> hostnames for local development.
"""
from typing import Optional

from fastapi import FastAPI

from tldserve import __version__
from tldserve.config import Settings, SiteConfig, get_settings, load_site_config
from tldserve.middleware import SiteMiddleware
from tldserve.routes import router


def create_app(
    settings: Optional[Settings] = None,
    site_config: Optional[SiteConfig] = None
) -> FastAPI:
    """Build the application around an immutable site configuration."""
    settings = settings or get_settings()
    if site_config is None:
        site_config = load_site_config(settings.config_path)

    app = FastAPI(
        title=settings.app_name,
        description="Serves project directories on <name>.<tld> hostnames",
        version=__version__,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None
    )
    app.state.settings = settings
    app.state.site_config = site_config

    app.add_middleware(SiteMiddleware)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event():
        """Report what will be served."""
        print(f"{settings.app_name} starting...")
        print(f"Serving *.{site_config.tld} from {len(site_config.paths)} path(s):")
        for path in site_config.paths:
            print(f"   • {path}")
        if site_config.default:
            print(f"Default site: {site_config.default}")

    @app.on_event("shutdown")
    async def shutdown_event():
        print(f"{settings.app_name} shutting down...")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "tldserve.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
