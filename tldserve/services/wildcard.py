"""
Wildcard DNS host normalization for tldserve

Wildcard DNS providers such as nip.io embed an IP address in the hostname,
e.g. http://myapp.192.168.0.10.nip.io. Tunnel services do something similar
(http://myapp.ngrok.example). These helpers strip such a suffix so the host
can be resolved to a site like any other <name>.<tld> host.
"""
from __future__ import annotations
import re
from functools import lru_cache
from typing import Iterable, Pattern, Tuple

# Four IPv4 octets joined by "." or "-"
BUILTIN_SERVICES: Tuple[str, ...] = (
    ".*.*.*.*.nip.io",
    "-*-*-*-*.nip.io",
)

_PATTERN_CHARS = re.compile(r"^[A-Za-z0-9.*-]+$")


class InvalidPatternError(ValueError):
    """Raised for a tunnel service pattern that cannot be compiled."""


def compile_pattern(service: str) -> str:
    """Translate a wildcard host pattern into a regex fragment.

    Literal text is escaped and every ``*`` becomes a greedy ``.*``. The
    fragment starts with a capturing group for whatever precedes the
    service suffix.
    """
    if not isinstance(service, str) or not service:
        raise InvalidPatternError(f"Empty tunnel service pattern: {service!r}")
    if not _PATTERN_CHARS.match(service):
        raise InvalidPatternError(
            f"Tunnel service pattern {service!r} may only contain letters, "
            f"digits, '.', '-' and '*'"
        )
    if "**" in service:
        raise InvalidPatternError(f"Adjacent wildcards in pattern {service!r}")
    if not service.strip("*"):
        raise InvalidPatternError(f"Pattern {service!r} has no literal text")

    literal_parts = [re.escape(part) for part in service.split("*")]
    return "(.*)" + ".*".join(literal_parts)


@lru_cache(maxsize=32)
def build_matcher(tunnel_services: Tuple[str, ...] = ()) -> Pattern[str]:
    """Combine built-in and configured services into one anchored regex.

    Alternatives keep configuration order (built-ins first) and the regex
    engine takes the first alternative that matches.
    """
    services = BUILTIN_SERVICES + tuple(tunnel_services)
    alternation = "|".join(compile_pattern(service) for service in services)
    return re.compile(f"(?:{alternation})\\Z", re.IGNORECASE)


def normalize(host: str, tunnel_services: Iterable[str] = ()) -> str:
    """Rewrite a wildcard DNS / tunnel host back to the site host.

    A matching host is replaced by the text before the service suffix,
    which may be empty. Any ``:port`` suffix is removed afterwards.
    """
    match = build_matcher(tuple(tunnel_services)).search(host)

    if match:
        # Only the alternative that matched has a non-None group
        host = next(group for group in match.groups() if group is not None)

    if ":" in host:
        host = host.split(":", 1)[0]

    return host
