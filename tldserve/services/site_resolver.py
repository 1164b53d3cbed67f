"""
Site Resolver for tldserve

Turns an HTTP host into a project directory:

    host -> wildcard DNS normalization -> site name -> directory search

Project roots are searched in configured order. Within a root, a directory
named exactly like the site (a linked subdomain such as ``api.shop``) wins
immediately; a directory named after the last label of the site name is
only used once the whole root has been scanned without an exact match.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Iterator, Optional

from tldserve.config import SiteConfig
from tldserve.services.request_uri import extract_path
from tldserve.services.wildcard import normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedSite:
    """A request resolved to a site directory."""
    name: str
    path: str
    uri: str = "/"
    is_default: bool = False


def site_name(host: str, config: SiteConfig) -> str:
    """Derive the bare site name from an HTTP host.

    Strips wildcard DNS suffixes and the port, then a trailing ``.<tld>``
    (case-sensitive, once) and finally a leading ``www.``.
    """
    name = normalize(host, config.tunnel_services)

    suffix = "." + config.tld
    # basename() semantics: a name equal to the suffix is kept as is
    if name.endswith(suffix) and len(name) > len(suffix):
        name = name[: -len(suffix)]

    if name.startswith("www."):
        name = name[4:]

    return name


def domain_from_site_name(name: str) -> str:
    """Return the last dot-separated label of a site name."""
    return name.split(".")[-1]


def _subdirectories(root: str) -> Iterator[str]:
    with os.scandir(root) as entries:
        for entry in entries:
            try:
                if entry.is_dir():
                    yield entry.name
            except OSError:
                continue


def resolve(name: str, config: SiteConfig) -> Optional[str]:
    """Find the directory serving ``name`` in the configured project roots."""
    wanted = name.lower()
    domain = domain_from_site_name(name).lower()

    for root in config.paths:
        try:
            dirs = list(_subdirectories(root))
        except OSError as e:
            logger.debug("Skipping unreadable root %s: %s", root, e)
            continue

        candidate = None

        # Hosts arrive lowercased, directory names keep their case on disk
        for dir_name in dirs:
            if dir_name.lower() == wanted:
                return os.path.join(root, dir_name)

            if dir_name.lower() == domain:
                # Keep scanning, an exact match later in this root still wins
                candidate = os.path.join(root, dir_name)

        if candidate:
            return candidate

    return None


def default_path(config: SiteConfig) -> Optional[str]:
    """Return the configured default site directory if it exists."""
    default = config.default
    if isinstance(default, str) and default and os.path.isdir(default):
        return default
    return None


def resolve_site(host: str, raw_uri: str, config: SiteConfig) -> Optional[ResolvedSite]:
    """Resolve a request to a site, falling back to the default site."""
    name = site_name(host, config)
    uri = extract_path(raw_uri)

    path = resolve(name, config)
    if path is not None:
        logger.debug("Resolved %s (%s) to %s", host, name, path)
        return ResolvedSite(name=name, path=path, uri=uri)

    fallback = default_path(config)
    if fallback is not None:
        logger.debug("No site for %s, using default %s", host, fallback)
        return ResolvedSite(name=name, path=fallback, uri=uri, is_default=True)

    logger.debug("No site for %s", host)
    return None
