"""Validate command output against the registered schema.

Commands live at ``droid_patch.api.<domain>.cmd_<name>``; the schema for a
command is registered under ``(<domain>, <name>)``.
"""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from . import _output_schemas  # noqa: F401  (registers all schemas)
from .schema_registry import schema_registry


def _command_key(func: Callable) -> tuple[str, str] | None:
    """Return ``(domain, command)`` for an API command function, None otherwise."""
    parts = func.__module__.split(".")
    if len(parts) < 3 or parts[:2] != ["droid_patch", "api"]:
        return None
    if not func.__name__.startswith("cmd_"):
        return None
    return parts[2], func.__name__.removeprefix("cmd_")


def _describe(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        field = ".".join(str(part) for part in item.get("loc", ())) or "<root>"
        problems.append(f"{field}: {item.get('msg', '')}")
    return "; ".join(problems)


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` and return it with defaults filled in.

    The result is dumped in JSON mode, so paths and other rich values in nested
    dicts (per-patch results, alias details) reach the YAML/JSON writers as
    plain strings. Functions outside the command layer, or commands without a
    registered schema, pass through unchanged.

    Raises:
        ValueError: If the output does not match the schema; lists each bad field
    """
    key = _command_key(func)
    if key is None:
        return output

    schema_class = schema_registry.get_output_schema(*key)
    if schema_class is None:
        return output

    try:
        validated = schema_class.model_validate(output)
    except ValidationError as e:
        raise ValueError(f"Output validation failed for {key[0]}.{key[1]}: {_describe(e)}") from e
    return validated.model_dump(mode="json")
