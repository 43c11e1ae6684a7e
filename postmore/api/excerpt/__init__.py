"""Excerpt API module."""

from ._find_marker import _find_marker as find_marker
from ._more_link import _more_link as more_link
from .has_marker import has_marker
from .postmore_filter import postmore_filter

__all__ = [
    "find_marker",
    "has_marker",
    "more_link",
    "postmore_filter",
]
