"""tldserve - serve project directories on <name>.<tld> hostnames."""

__version__ = "0.1.0"
