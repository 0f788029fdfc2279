"""Split wiki link text into path and subpath."""


def split_linktext(linktext: str) -> tuple[str, str]:
    """Split ``path#subpath`` into its components.

    Returns:
        (path, subpath) with subpath empty when the link has no fragment
    """
    path, _, subpath = linktext.strip().partition("#")
    return path.strip(), subpath.strip()
