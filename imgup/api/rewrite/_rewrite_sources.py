"""Replace literal image snippets with uploaded embeds (UNO: single function)."""

from collections.abc import Callable

from ..link.ImageRef import ImageRef


def _rewrite_sources(
    content: str,
    images: list[ImageRef],
    urls: list[str],
    format_name: Callable[[str], str],
) -> str:
    """Replace every occurrence of each image's ``source`` with ``![name](url)``.

    ``urls`` is aligned with ``images``.
    """
    for image, url in zip(images, urls):
        content = content.replace(image.source, f"![{format_name(image.name)}]({url})")
    return content
