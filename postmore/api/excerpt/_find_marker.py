from ...constants import MORE_MARKERS


def _find_marker(content: str) -> str | None:
    """Return the highest-priority excerpt marker present in content."""
    for marker in MORE_MARKERS:
        if marker in content:
            return marker
    return None
