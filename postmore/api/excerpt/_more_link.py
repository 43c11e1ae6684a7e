from ...constants import MORE_LINK_TEMPLATE


def _more_link(url: str, text: str) -> str:
    """Build the read-more fragment. Values are inserted unescaped."""
    return MORE_LINK_TEMPLATE.format(url=url, text=text)
