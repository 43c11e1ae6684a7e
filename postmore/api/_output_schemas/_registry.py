"""Command output schemas, keyed by (domain, command)."""

from pydantic import BaseModel

_SCHEMAS: dict[tuple[str, str], type[BaseModel]] = {}


def register_output_schema(domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
    """Bind schema_class to the cmd_<command_name> function of a domain."""
    if (domain, command_name) in _SCHEMAS:
        raise ValueError(f"Schema already registered for {domain}.{command_name}")
    _SCHEMAS[(domain, command_name)] = schema_class


def get_output_schema(domain: str, command_name: str) -> type[BaseModel] | None:
    return _SCHEMAS.get((domain, command_name))
