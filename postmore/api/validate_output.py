from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def _schema_key(func: Callable) -> tuple[str, str] | None:
    # postmore.api.<domain>.cmd_<name>
    parts = func.__module__.split(".")
    if parts[:2] != ["postmore", "api"] or len(parts) < 3 or not func.__name__.startswith("cmd_"):
        return None
    return parts[2], func.__name__.removeprefix("cmd_")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Check a command's output against its schema and fill in defaults.

    Functions outside postmore.api, or without a registered schema, pass through untouched.

    Raises:
        ValueError: If output does not match the schema
    """
    key = _schema_key(func)
    schema_class = get_output_schema(*key) if key else None
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"Output validation failed for {'.'.join(key)}: {e}") from e
