"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import click

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: click.Context) -> str:
    """Get the display format stored by the root app callback.

    Raises:
        RuntimeError: If no context in the chain carries a display format.
        ValueError: If an invalid display format value is encountered.
    """
    current: click.Context | None = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent

    raise RuntimeError("Display format not set in the Typer context chain")


def _handle_stage_result(func: F, ctx: click.Context) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    ``ctx`` is the Typer context of the invoking CLI callback; the display
    format is read from it before the command runs.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from droid_patch.cli.display.display_context import display_context

        display_format = _extract_display_format(ctx)
        display = display_context.get_display("cli")
        _run_single_execution(func, args, kwargs, display, display_format)

    return wrapper  # type: ignore[return-value]
