"""tldserve routes."""
from tldserve.routes.api import router

__all__ = ["router"]
