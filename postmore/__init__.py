"""postmore - read-more excerpt filter for Jinja2 templates."""

from .api.excerpt import find_marker, has_marker, more_link, postmore_filter
from .constants import MORE_LINK_TEMPLATE, MORE_MARKERS
from .templating import FILTER_NAME, PostMoreExtension, create_environment, register_filter, render_template

__all__ = [
    "FILTER_NAME",
    "MORE_LINK_TEMPLATE",
    "MORE_MARKERS",
    "PostMoreExtension",
    "create_environment",
    "find_marker",
    "has_marker",
    "more_link",
    "postmore_filter",
    "register_filter",
    "render_template",
]
