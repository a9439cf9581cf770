#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/writers/html.py
"""HTML writer.

Writes element events back out as markup unchanged. This is the writer
selected for every output format other than Markdown.

"""

from __future__ import annotations

from collections.abc import Mapping

from mdstream.exceptions import UnbalancedElementError
from mdstream.options.base import WriterOptions
from mdstream.utils.html_utils import escape_html, format_end_tag, format_start_tag
from mdstream.writers.base import BaseWriter


class HtmlWriter(BaseWriter):
    """Write element events as HTML.

    Text content is escaped (``&``, ``<`` and ``>``); attribute values are
    escaped including double quotes.

    Examples
    --------
        >>> writer = HtmlWriter()
        >>> writer.open("p")
        >>> writer.text("Fish & Chips")
        >>> writer.close()
        >>> writer.as_string()
        '<p>Fish &amp; Chips</p>'

    """

    def __init__(self, options: WriterOptions | None = None):
        """Initialize the HTML writer with options."""
        super().__init__(options)
        self._open_tags: list[str] = []

    def open(self, tag_name: str, attributes: Mapping[str, str] | None = None) -> None:
        """Write an opening tag."""
        self._open_tags.append(tag_name)
        self._fragments.append(format_start_tag(tag_name, attributes))

    def close(self) -> None:
        """Write the closing tag of the innermost open element."""
        if not self._open_tags:
            raise UnbalancedElementError()
        self._fragments.append(format_end_tag(self._open_tags.pop()))

    def self_closing(self, tag_name: str, attributes: Mapping[str, str] | None = None) -> None:
        """Write a self-closing tag, e.g. ``<br />``."""
        self._fragments.append(format_start_tag(tag_name, attributes, self_closing=True))

    def text(self, value: str) -> None:
        """Write escaped text content."""
        self._fragments.append(escape_html(value))
