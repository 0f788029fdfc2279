"""Shared pytest configuration and fixtures for all tests."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from imgup.api.config.ImgupConfig import ImgupConfig


def pytest_configure(config):
    for marker in ("unit", "smoke", "integration"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(vault_dir: Path) -> dict:
    """Minimal valid imgup configuration: an Obsidian vault and the offline uploader."""
    return {
        "vault": {
            "type": "obsidian",
            "base_dir": str(vault_dir),
        },
        "uploader": {
            "type": "test",
            "data": {"base_url": "https://img.example.com/"},
        },
    }


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def run_cmd() -> Callable:
    """Pytest fixture returning the command runner."""
    return _run_cmd


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Empty vault directory."""
    vault = tmp_path / "vault"
    vault.mkdir()
    return vault


@pytest.fixture
def write_vault(vault_dir: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Return a helper that writes ``{relative path: content}`` into the vault."""

    def _write(files: dict[str, str | bytes]) -> Path:
        for rel, content in files.items():
            path = vault_dir / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8", newline="")
        return vault_dir

    return _write


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(vault_dir: Path) -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict(vault_dir)


@pytest.fixture
def imgup_home(tmp_path: Path, monkeypatch) -> Path:
    """Point IMGUP_HOME at an empty directory (no config file)."""
    home = tmp_path / ".imgup"
    home.mkdir()
    monkeypatch.setenv("IMGUP_HOME", str(home))
    return home


@pytest.fixture
def configured_home(imgup_home: Path, minimal_config_dict: dict) -> Path:
    """IMGUP_HOME with a minimal config file.

    Returns:
        Path to the imgup home directory
    """
    (imgup_home / "config.json").write_text(json.dumps(minimal_config_dict))
    return imgup_home


@pytest.fixture
def write_config(imgup_home: Path, minimal_config_dict: dict) -> Callable[..., ImgupConfig]:
    """Return a helper that writes the minimal config with section overrides."""

    def _write(**sections: dict) -> ImgupConfig:
        data = {**minimal_config_dict, **sections}
        (imgup_home / "config.json").write_text(json.dumps(data))
        return ImgupConfig(**data)

    return _write
