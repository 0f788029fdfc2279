"""Tests for imgup.api.validate_output."""

import pytest

from imgup.api.config.cmd_version import cmd_version
from imgup.api.rewrite.cmd_paste import cmd_paste
from imgup.api.validate_output import validate_output


def test_valid_output_fills_defaults():
    assert validate_output(cmd_version, {"version": "1.0"}) == {"errors": [], "warnings": [], "version": "1.0"}


def test_invalid_output_raises():
    with pytest.raises(ValueError, match="rewrite.paste"):
        validate_output(cmd_paste, {"success": True})


def test_unregistered_function_passes_through():
    def helper():
        pass

    assert validate_output(helper, {"x": 1}) == {"x": 1}
