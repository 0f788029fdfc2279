"""Display text policy for rewritten references (UNO: single function)."""

DEFAULT_CAPTURE_NAME = "image.png"


def format_display_name(name: str, image_size_suffix: str = "", image_desc: str = "origin") -> str:
    """Return the display text to put in ``![...](url)``.

    ``origin`` keeps the name, ``none`` drops it and ``removeDefault`` drops only
    the default name given to pasted captures. Unknown policies behave like ``origin``.
    """
    if image_desc == "none":
        return ""
    if image_desc == "removeDefault" and name == DEFAULT_CAPTURE_NAME:
        return ""
    return f"{name}{image_size_suffix}"
