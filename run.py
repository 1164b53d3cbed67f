#!/usr/bin/env python3
"""
tldserve - Quick Start Script

Run this script to start the tldserve server.
"""
import sys
import os

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == "__main__":
    import uvicorn
    from tldserve.config import get_settings, load_site_config

    settings = get_settings()
    site_config = load_site_config(settings.config_path)

    print("=" * 50)
    print("tldserve")
    print("=" * 50)
    print(f"Server starting at http://{settings.host}:{settings.port}")
    print(f"Sites: *.{site_config.tld} ({settings.config_path})")
    print("=" * 50)

    uvicorn.run(
        "tldserve.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
