"""Request URI helpers."""
from urllib.parse import unquote


def extract_path(raw_request_uri: str) -> str:
    """Return the percent-decoded path of a raw request URI, without query string.

    ``+`` is left alone and malformed escapes pass through unchanged.
    """
    return unquote(raw_request_uri.split("?", 1)[0])
