"""Image file classification (UNO: single function)."""

import posixpath

IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".svg", ".tiff", ".webp", ".avif"})


def is_image_type(path: str) -> bool:
    """Return True if ``path`` names an image file by its extension."""
    return posixpath.splitext(path)[1].lower() in IMAGE_EXTENSIONS
