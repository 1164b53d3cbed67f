"""
Error pages for tldserve
"""
from pathlib import Path
from typing import Optional

import aiofiles

TEMPLATES_PATH = Path(__file__).parent.parent / "templates"

_not_found_html: Optional[str] = None


async def render_not_found() -> str:
    """Get the 404 page, read once from the templates folder."""
    global _not_found_html
    if _not_found_html is None:
        async with aiofiles.open(TEMPLATES_PATH / "404.html", "r", encoding="utf-8") as f:
            _not_found_html = await f.read()
    return _not_found_html
