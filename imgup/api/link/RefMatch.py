"""RefMatch model (UNO: single model)."""

from dataclasses import dataclass

KIND_INLINE = "inline"
KIND_WIKI = "wiki"


@dataclass(frozen=True)
class RefMatch:
    """A link found in a piece of text.

    ``start``/``end`` are half-open offsets into the text that was parsed.
    ``residual`` is the verbatim ``|display`` tail of a wiki link.
    """

    kind: str
    display: str
    target: str
    start: int
    end: int
    residual: str = ""
    is_network: bool = False
    is_embed: bool = True
    raw: str = ""
