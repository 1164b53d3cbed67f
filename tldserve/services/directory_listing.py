"""
Directory Listing for tldserve

Renders a plain index page for site directories that have no index file.
"""
from __future__ import annotations
import re
from html import escape
from pathlib import Path
from typing import Optional

_DIGITS = re.compile(r"(\d+)")


def natural_key(name: str) -> list:
    """Case-insensitive natural sort key ("file2" before "file10")."""
    return [
        int(part) if part.isdigit() else part.lower()
        for part in _DIGITS.split(name)
    ]


def sorted_entries(directory: Path) -> list[Path]:
    """Non-hidden children of a directory, directories first."""
    entries = [p for p in directory.iterdir() if not p.name.startswith(".")]
    return sorted(entries, key=lambda p: (not p.is_dir(), natural_key(p.name)))


def list_directory(site_path: str, uri: str) -> Optional[str]:
    """Render the listing for ``uri`` inside a site, or None if it doesn't exist."""
    is_root = uri == "/"
    directory = Path(site_path) if is_root else Path(site_path + uri)

    if not directory.is_dir():
        return None

    links = []
    for entry in sorted_entries(directory):
        name = escape(entry.name, quote=True)
        if is_root:
            links.append(f"<a href='/{name}'>/{name}</a>")
        else:
            base = escape(uri.rstrip("/"), quote=True)
            links.append(f"<a href='{base}/{name}'>{base}/{name}/</a>")

    return f"<h1>Index of {escape(uri)}</h1><hr>" + "<br>\n".join(links)
