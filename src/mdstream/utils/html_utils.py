"""HTML-related utility helpers."""

from __future__ import annotations

from collections.abc import Mapping
from html import escape as _html_escape


def escape_html(text: str, *, quote: bool = False) -> str:
    """Escape HTML special characters in text content."""
    return _html_escape(text, quote=quote)


def format_attributes(attributes: Mapping[str, str] | None) -> str:
    """Render attributes as ``name="value"`` pairs, each with a leading space.

    Parameters
    ----------
    attributes : Mapping[str, str] or None
        Attribute names and values, rendered in mapping order

    Returns
    -------
    str
        Attribute string, empty when there are no attributes

    """
    if not attributes:
        return ""
    return "".join(f' {name}="{escape_html(str(value), quote=True)}"' for name, value in attributes.items())


def format_start_tag(tag_name: str, attributes: Mapping[str, str] | None = None, *, self_closing: bool = False) -> str:
    """Build a literal opening (or self-closing) HTML tag.

    Examples
    --------
        >>> format_start_tag("td")
        '<td>'
        >>> format_start_tag("img", {"src": "a.png"}, self_closing=True)
        '<img src="a.png" />'

    """
    attrs = format_attributes(attributes)
    if self_closing:
        return f"<{tag_name}{attrs} />"
    return f"<{tag_name}{attrs}>"


def format_end_tag(tag_name: str) -> str:
    """Build a literal closing HTML tag."""
    return f"</{tag_name}>"
