from ._find_marker import _find_marker


def has_marker(content: str) -> bool:
    """Check whether postmore_filter would truncate content."""
    return _find_marker(content) is not None
