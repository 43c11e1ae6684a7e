"""Output schemas for API commands."""

from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema
from .excerpt import ExcerptRenderOutput, ExcerptTruncateOutput

__all__ = [
    "BaseOutputSchema",
    "ExcerptRenderOutput",
    "ExcerptTruncateOutput",
    "get_output_schema",
    "register_output_schema",
]
