"""Resolve the imgup home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get imgup home directory based on IMGUP_HOME or default to ~/.imgup."""
    env_home = os.environ.get("IMGUP_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".imgup"
