"""Output schemas for excerpt commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ExcerptTruncateOutput(BaseOutputSchema):
    """Output schema for excerpt truncate command."""
    path: str = Field(..., description="Path of the post body that was read")
    marker: str = Field(..., description="Marker that triggered truncation, empty string if none")
    truncated: bool = Field(..., description="Whether the body was cut at a marker")
    content: str = Field(..., description="Filtered body, empty string on failure")


class ExcerptRenderOutput(BaseOutputSchema):
    """Output schema for excerpt render command."""
    template: str = Field(..., description="Path of the rendered template")
    content: str = Field(..., description="Rendered output, empty string on failure")


register_output_schema("excerpt", "truncate", ExcerptTruncateOutput)
register_output_schema("excerpt", "render", ExcerptRenderOutput)
