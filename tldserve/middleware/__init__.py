"""tldserve middleware."""
from tldserve.middleware.sites import SiteMiddleware

__all__ = ["SiteMiddleware"]
