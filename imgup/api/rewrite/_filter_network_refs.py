"""Drop network references the configuration does not allow (UNO: single function)."""

from ..link.has_black_domain import has_black_domain
from ..link.ImageRef import ImageRef
from .RewriteConfig import RewriteConfig


def _filter_network_refs(refs: list[ImageRef], config: RewriteConfig) -> list[ImageRef]:
    """Keep local refs, and network refs only when allowed and not black-listed."""
    kept = []
    for ref in refs:
        if ref.is_network:
            if not config.work_on_network or has_black_domain(ref.path, config.network_black_domains):
                continue
        kept.append(ref)
    return kept
