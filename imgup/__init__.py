"""imgup - upload vault images and rewrite the notes that reference them."""

from .utils.get_package_version import get_package_version

__version__ = get_package_version()

__all__ = ["__version__"]
