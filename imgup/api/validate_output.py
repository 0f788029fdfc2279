"""Validate a command output dict against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def validate_output(func: Callable[..., Any], output: dict[str, Any]) -> dict[str, Any]:
    """Round-trip ``output`` through the schema registered for ``func``.

    The domain is taken from the command module path
    (``imgup.api.<domain>.cmd_<name>``), the command name from the function name.
    Commands without a registered schema pass through unchanged.

    Raises:
        ValueError: If the output does not match the schema.
    """
    parts = func.__module__.split(".")
    if len(parts) < 3 or parts[1] != "api":
        return output
    domain = parts[2]
    command_name = func.__name__.removeprefix("cmd_")
    schema = get_output_schema(domain, command_name)
    if schema is None:
        return output
    try:
        return schema(**output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"{domain}.{command_name}: {e}") from e
