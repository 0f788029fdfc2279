"""Vault path resolution error."""


class VaultPathError(Exception):
    """Raised when a user-supplied path is outside the vault or missing."""
