"""Excerpt truncation - cut a rendered post at its more marker."""

from ._find_marker import _find_marker
from ._more_link import _more_link


def postmore_filter(content: str, url: str, text: str) -> str:
    """Truncate content at the first excerpt marker and append a read-more link.

    `<!--more-->` is looked for first, then `<!-- more -->`. Only the text
    before the first occurrence of the matched marker is kept; everything
    after it, later markers included, is dropped. Content without either
    marker is returned unchanged.

    Args:
        content: Rendered post body
        url: Link target, inserted verbatim
        text: Link label, inserted verbatim

    Returns:
        The truncated body plus link markup, or content as given

    Examples:
        >>> postmore_filter("A<!--more-->B", "/p/1", "Read more")
        "A<p class='more'><a href='/p/1'>Read more</a></p>"
        >>> postmore_filter("no marker", "/p/1", "Read more")
        'no marker'
    """
    marker = _find_marker(content)
    if marker is None:
        return content
    excerpt, _, _ = content.partition(marker)
    return excerpt + _more_link(url, text)
