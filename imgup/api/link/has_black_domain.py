"""Network image host filter (UNO: single function)."""

from urllib.parse import urlparse


def has_black_domain(url: str, black_domains: str) -> bool:
    """Return True if the host of ``url`` contains any comma-separated black domain."""
    domains = [d.strip() for d in black_domains.split(",") if d.strip()]
    if not domains:
        return False
    host = urlparse(url).hostname or ""
    return any(domain in host for domain in domains)
