"""tldserve models."""
from tldserve.models.response import HealthResponse, ResolutionResponse

__all__ = ["HealthResponse", "ResolutionResponse"]
