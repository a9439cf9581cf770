#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/writers/markdown.py
"""Markdown writer driven by element lifecycle events.

This module provides the MarkdownWriter class, which turns a depth-first
stream of ``open``/``text``/``close``/``self_closing`` calls into Markdown
text without ever building a tree.

Each element kind maps to a handler that produces the text written when the
element opens and when it closes. Some closing text depends on events that
happen between the two calls (the header separator of a table needs the
number of cells in the first row, a list item must not be terminated twice),
so handlers may return callables that are evaluated only when the element
closes.

Ambient state that spans sibling elements is kept on the writer instance:

- list state (ordered or not, nesting depth, item count), saved in the
  context frame of every element and restored when that element closes
- table state (inside a table, rows closed, cells opened in the current row)
- the passthrough depth, counting open ancestors configured to be written
  as literal HTML

"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Optional, Union

from mdstream.constants import (
    MARKDOWN_BLOCK_SEPARATOR,
    MARKDOWN_BOLD_DELIMITER,
    MARKDOWN_CODE_FENCE,
    MARKDOWN_EMPHASIS_DELIMITER,
    MARKDOWN_HARD_BREAK,
    MARKDOWN_LIST_INDENT,
    MARKDOWN_SPECIAL_CHARS,
    MARKDOWN_STRONG_DELIMITER,
    MARKDOWN_TABLE_CELL_SEPARATOR,
    MARKDOWN_TABLE_HEADER_SEGMENT,
    MARKDOWN_UNORDERED_BULLET,
    MAX_HEADING_LEVEL,
    TABLE_INLINE_SEPARATOR,
    TABLE_LIST_ITEM_TERMINATOR,
    AnchorPosition,
)
from mdstream.exceptions import UnbalancedElementError
from mdstream.options.base import WriterOptions
from mdstream.utils.html_utils import escape_html, format_end_tag, format_start_tag
from mdstream.writers.base import BaseWriter

logger = logging.getLogger(__name__)

_SPECIAL_CHARS_PATTERN = re.compile(f"([{re.escape(MARKDOWN_SPECIAL_CHARS)}])")

ElementStart = Union[str, Callable[[], str], None]
ElementEnd = Union[str, Callable[[], Optional[str]], None]


def escape_markdown(value: str) -> str:
    """Escape text so that it is not read as Markdown syntax.

    Backslashes are doubled first, then every Markdown-significant character
    is prefixed with a backslash.

    Parameters
    ----------
    value : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown("1. *not* a list")
        '1\\\\. \\\\*not\\\\* a list'

    """
    return _SPECIAL_CHARS_PATTERN.sub(r"\\\1", value.replace("\\", "\\\\"))


@dataclass
class ElementOutput:
    """Text produced for one element.

    Parameters
    ----------
    start : str, callable or None
        Text written when the element opens. A callable is evaluated after
        the element's context frame has been pushed.
    end : str, callable or None
        Text written when the element closes. A callable is evaluated after
        the enclosing list state has been restored.
    anchor_position : {"before", "after"}, default "after"
        Where an ``id`` anchor goes relative to the start text.

    """

    start: ElementStart = None
    end: ElementEnd = None
    anchor_position: AnchorPosition = "after"


@dataclass
class ListState:
    """Numbering state of the innermost open list."""

    is_ordered: bool
    indent: int = 0
    count: int = 0


@dataclass
class TableState:
    """Row and cell counters of the table being written."""

    is_table: bool = False
    row_count: int = 0
    column_count: int = 0

    def reset(self, is_table: bool = False) -> None:
        self.is_table = is_table
        self.row_count = 0
        self.column_count = 0


@dataclass(frozen=True)
class ContextFrame:
    """What is needed to close an open element."""

    tag_name: str
    end: ElementEnd
    list_state: ListState | None


ElementHandler = Callable[["MarkdownWriter", str, Mapping[str, str]], ElementOutput]


class MarkdownWriter(BaseWriter):
    """Write element events as Markdown.

    Parameters
    ----------
    options : WriterOptions or None, default = None
        Writer options. ``preserve_as_html`` names the element kinds that are
        written as literal HTML together with everything nested inside them.

    Examples
    --------
        >>> writer = MarkdownWriter()
        >>> writer.open("a", {"href": "http://example.com"})
        >>> writer.text("Hello")
        >>> writer.close()
        >>> writer.as_string()
        '[Hello](http://example.com)'

    """

    def __init__(self, options: WriterOptions | None = None):
        """Initialize the Markdown writer with options."""
        super().__init__(options)
        self._preserve_as_html: frozenset[str] = self.options.preserve_as_html
        self._stack: list[ContextFrame] = []
        self._list: ListState | None = None
        self._list_item_closed: bool = False
        self._table = TableState()
        self._preserve_depth: int = 0

    def open(self, tag_name: str, attributes: Mapping[str, str] | None = None) -> None:
        """Write the start of an element."""
        self._open(tag_name, attributes or {}, self_closing=False)

    def self_closing(self, tag_name: str, attributes: Mapping[str, str] | None = None) -> None:
        """Write an element without content, e.g. ``br`` or ``img``."""
        self._open(tag_name, attributes or {}, self_closing=True)
        self.close()

    def close(self) -> None:
        """Write the end of the innermost open element.

        Raises
        ------
        UnbalancedElementError
            If no element is open

        """
        if not self._stack:
            raise UnbalancedElementError()
        frame = self._stack.pop()

        self._list = frame.list_state
        end = frame.end() if callable(frame.end) else frame.end
        self._fragments.append(end or "")

        if frame.tag_name in self._preserve_as_html:
            self._preserve_depth -= 1
            if self._preserve_depth == 0:
                logger.debug(f"Leaving HTML passthrough at '{frame.tag_name}'")
                self._fragments.append(MARKDOWN_BLOCK_SEPARATOR)

    def text(self, value: str) -> None:
        """Write text, escaped unless inside an element preserved as HTML."""
        if self._preserve_depth > 0:
            self._fragments.append(value)
        else:
            self._fragments.append(escape_markdown(value))

    def _open(self, tag_name: str, attributes: Mapping[str, str], self_closing: bool) -> None:
        if tag_name in self._preserve_as_html:
            if self._preserve_depth == 0:
                logger.debug(f"Entering HTML passthrough at '{tag_name}'")
            self._preserve_depth += 1

        if self._preserve_depth > 0:
            element = self._literal_element(tag_name, attributes, self_closing)
        else:
            handler = _ELEMENT_HANDLERS.get(tag_name, MarkdownWriter._plain_element)
            element = handler(self, tag_name, attributes)

        self._stack.append(ContextFrame(tag_name=tag_name, end=element.end, list_state=self._list))

        anchor_before_start = element.anchor_position == "before"
        if anchor_before_start:
            self._write_anchor(attributes)

        start = element.start() if callable(element.start) else element.start
        self._fragments.append(start or "")

        if not anchor_before_start:
            self._write_anchor(attributes)

    def _write_anchor(self, attributes: Mapping[str, str]) -> None:
        # literal tags already carry their id
        if self._preserve_depth > 0:
            return
        element_id = attributes.get("id")
        if element_id:
            self._fragments.append(f'<a id="{escape_html(element_id, quote=True)}"></a>')

    def _in_table(self, if_table: str, otherwise: str) -> str:
        return if_table if self._table.is_table else otherwise

    @staticmethod
    def _literal_element(tag_name: str, attributes: Mapping[str, str], self_closing: bool) -> ElementOutput:
        if self_closing:
            return ElementOutput(start=format_start_tag(tag_name, attributes, self_closing=True))
        return ElementOutput(start=format_start_tag(tag_name, attributes), end=format_end_tag(tag_name))

    def _plain_element(self, tag_name: str, attributes: Mapping[str, str]) -> ElementOutput:
        logger.debug(f"No Markdown equivalent for '{tag_name}', writing its content as plain text")
        return ElementOutput()

    def _symmetric_element(self, tag_name: str, attributes: Mapping[str, str], delimiter: str) -> ElementOutput:
        return ElementOutput(start=delimiter, end=delimiter)

    def _paragraph(self, tag_name: str, attributes: Mapping[str, str]) -> ElementOutput:
        return ElementOutput(start="", end=self._in_table(TABLE_INLINE_SEPARATOR, MARKDOWN_BLOCK_SEPARATOR))

    def _line_break(self, tag_name: str, attributes: Mapping[str, str]) -> ElementOutput:
        return ElementOutput(start=self._in_table(TABLE_INLINE_SEPARATOR, MARKDOWN_HARD_BREAK))

    def _heading(self, tag_name: str, attributes: Mapping[str, str], level: int) -> ElementOutput:
        return ElementOutput(
            start=self._in_table("", "#" * level + " "),
            end=self._in_table(TABLE_INLINE_SEPARATOR, MARKDOWN_BLOCK_SEPARATOR),
        )

    def _link(self, tag_name: str, attributes: Mapping[str, str]) -> ElementOutput:
        href = attributes.get("href") or ""
        if not href:
            logger.debug("Link without href, writing its content as plain text")
            return ElementOutput()
        return ElementOutput(start="[", end=f"]({href})", anchor_position="before")

    def _image(self, tag_name: str, attributes: Mapping[str, str]) -> ElementOutput:
        src = attributes.get("src") or ""
        alt_text = attributes.get("alt") or ""
        if not (src or alt_text):
            logger.debug("Image without src or alt, skipping")
            return ElementOutput()
        return ElementOutput(start=f"![{alt_text}]({src})")

    def _list_element(self, tag_name: str, attributes: Mapping[str, str], is_ordered: bool) -> ElementOutput:
        """Start a new list scope.

        The new list state is installed lazily, after the context frame has
        captured the enclosing one, so that closing the list restores it.
        """

        def start() -> str:
            parent = self._list
            self._list = ListState(is_ordered=is_ordered, indent=parent.indent + 1 if parent else 0)
            # a nested list starts on its own line, ending the parent item's text
            return self._in_table("", "\n" if parent else "")

        def end() -> str:
            # self._list is the enclosing list again at this point
            return self._in_table("", "" if self._list else "\n")

        return ElementOutput(start=start, end=end)

    def _list_item(self, tag_name: str, attributes: Mapping[str, str]) -> ElementOutput:
        """Write a bullet or number and terminate the item once.

        An item whose nested list has already ended with a terminator is not
        terminated again: any list item closing after this one opened sets
        the shared closed flag.
        """
        current = self._list or ListState(is_ordered=False)
        current.count += 1
        self._list_item_closed = False

        bullet = f"{current.count}." if current.is_ordered else MARKDOWN_UNORDERED_BULLET
        start = self._in_table("", MARKDOWN_LIST_INDENT * current.indent + bullet + " ")

        def end() -> str | None:
            if self._list_item_closed:
                return None
            self._list_item_closed = True
            return self._in_table(TABLE_LIST_ITEM_TERMINATOR, "\n")

        return ElementOutput(start=start, end=end)

    def _table_element(self, tag_name: str, attributes: Mapping[str, str]) -> ElementOutput:
        self._table.reset(is_table=True)

        def end() -> str:
            self._table.reset()
            return "\n"

        return ElementOutput(start="", end=end)

    def _table_row(self, tag_name: str, attributes: Mapping[str, str]) -> ElementOutput:
        def end() -> str:
            row_end = MARKDOWN_TABLE_CELL_SEPARATOR + "\n"
            if self._table.row_count == 0:
                segments = MARKDOWN_TABLE_HEADER_SEGMENT * self._table.column_count
                row_end += f"{MARKDOWN_TABLE_CELL_SEPARATOR}{segments}\n"
            self._table.row_count += 1
            self._table.column_count = 0
            return row_end

        return ElementOutput(start="", end=end)

    def _table_cell(self, tag_name: str, attributes: Mapping[str, str]) -> ElementOutput:
        self._table.column_count += 1
        return ElementOutput(start=MARKDOWN_TABLE_CELL_SEPARATOR, end="")


_ELEMENT_HANDLERS: dict[str, ElementHandler] = {
    "p": MarkdownWriter._paragraph,
    "br": MarkdownWriter._line_break,
    "ul": partial(MarkdownWriter._list_element, is_ordered=False),
    "ol": partial(MarkdownWriter._list_element, is_ordered=True),
    "li": MarkdownWriter._list_item,
    "strong": partial(MarkdownWriter._symmetric_element, delimiter=MARKDOWN_STRONG_DELIMITER),
    "em": partial(MarkdownWriter._symmetric_element, delimiter=MARKDOWN_EMPHASIS_DELIMITER),
    "b": partial(MarkdownWriter._symmetric_element, delimiter=MARKDOWN_BOLD_DELIMITER),
    "i": partial(MarkdownWriter._symmetric_element, delimiter=MARKDOWN_EMPHASIS_DELIMITER),
    "pre": partial(MarkdownWriter._symmetric_element, delimiter=MARKDOWN_CODE_FENCE),
    "a": MarkdownWriter._link,
    "img": MarkdownWriter._image,
    "table": MarkdownWriter._table_element,
    "tr": MarkdownWriter._table_row,
    "td": MarkdownWriter._table_cell,
}
_ELEMENT_HANDLERS.update(
    {f"h{level}": partial(MarkdownWriter._heading, level=level) for level in range(1, MAX_HEADING_LEVEL + 1)}
)
