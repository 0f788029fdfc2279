"""Reference grammar: image link parsing for notes."""

from .extract_image_refs import extract_image_refs
from .has_black_domain import has_black_domain
from .ImageRef import ImageRef
from .parse_inline_refs import parse_inline_refs
from .parse_wiki_refs import parse_wiki_refs
from .RefMatch import RefMatch
from .split_linktext import split_linktext

__all__ = [
    "ImageRef",
    "RefMatch",
    "extract_image_refs",
    "has_black_domain",
    "parse_inline_refs",
    "parse_wiki_refs",
    "split_linktext",
]
