"""
Response models for tldserve
"""
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field


class ResolutionResponse(BaseModel):
    """How a host would be resolved to a site directory."""

    host: str = Field(..., description="Host that was resolved")
    site_name: str = Field(..., description="Site name derived from the host")
    uri: str = Field("/", description="Decoded request path")
    path: Optional[str] = Field(None, description="Resolved site directory")
    is_default: bool = Field(False, description="Whether the default site was used")
    found: bool = Field(..., description="Whether any directory serves the host")

    class Config:
        json_schema_extra = {
            "example": {
                "host": "www.blog.test",
                "site_name": "blog",
                "uri": "/",
                "path": "/Users/me/Sites/Blog",
                "is_default": False,
                "found": True
            }
        }


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field("healthy", description="Service status")
    tld: str = Field(..., description="Configured top level domain")
    paths: List[str] = Field(default_factory=list, description="Project roots, in search order")
