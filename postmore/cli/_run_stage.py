"""Run an API command through the 4-stage pattern for the CLI."""

from collections.abc import Callable
from typing import Any

from ..api.StageResult import StageResult
from ..api.validate_output import validate_output
from .display import CLIDisplay


def _run_stage(func: Callable[..., StageResult], display: CLIDisplay, *args: Any, **kwargs: Any) -> StageResult:
    """Run command once and report each stage on the display.

    Stage 4 (output) is left to the caller, which decides what goes to stdout.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        display.info(f"Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    result.output = validate_output(func, result.output)

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    return result
