"""Fetch one network image (UNO: single function)."""

import requests  # type: ignore


def _download_image(url: str, timeout: float) -> tuple[bytes, str]:
    """Return the body and Content-Type of ``url``.

    Raises:
        requests.RequestException: On connection errors and non-2xx responses.
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.content, response.headers.get("Content-Type", "")
