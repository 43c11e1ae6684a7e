"""Shared constants for postmore markers, markup and home directory."""

# Excerpt markers, highest priority first
MORE_MARKERS = ("<!--more-->", "<!-- more -->")

# Themes target the "more" class, keep this markup byte-for-byte
MORE_LINK_TEMPLATE = "<p class='more'><a href='{url}'>{text}</a></p>"

POSTMORE_HOME_EXT = ".postmore"  # user-level state/config directory suffix

DEFAULT_FILTER_NAME = "postmore"
DEFAULT_LINK_TEXT = "Read more"
