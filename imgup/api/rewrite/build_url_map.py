"""Pair targets with uploaded URLs (UNO: single function)."""

from .UploadMismatchError import UploadMismatchError


def build_url_map(targets: list[str], urls: list[str]) -> dict[str, str]:
    """Zip ``targets`` and ``urls`` by position.

    Raises:
        UploadMismatchError: If the lists differ in length
    """
    if len(targets) != len(urls):
        raise UploadMismatchError(len(targets), len(urls))
    return dict(zip(targets, urls))
