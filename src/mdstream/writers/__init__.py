#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdstream/writers/__init__.py
"""Event writers for converting element streams to text output.

This package provides writers that are driven by element lifecycle events
(``open``, ``text``, ``close``, ``self_closing``) and produce a string:

- MarkdownWriter: Translate elements to Markdown syntax
- HtmlWriter: Write elements back out as HTML markup

Use ``create_writer`` to pick the writer matching a ``WriterOptions``.

Examples
--------
    >>> from mdstream.options import WriterOptions
    >>> from mdstream.writers import create_writer
    >>> writer = create_writer(WriterOptions(output_format="markdown"))
    >>> writer.open("strong")
    >>> writer.text("bold")
    >>> writer.close()
    >>> writer.as_string()
    '__bold__'

"""

from __future__ import annotations

import logging

from mdstream.constants import OUTPUT_FORMAT_MARKDOWN
from mdstream.options.base import WriterOptions
from mdstream.writers.base import BaseWriter
from mdstream.writers.html import HtmlWriter
from mdstream.writers.markdown import MarkdownWriter, escape_markdown

logger = logging.getLogger(__name__)


def create_writer(options: WriterOptions | None = None) -> BaseWriter:
    """Create a fresh writer for the configured output format.

    Parameters
    ----------
    options : WriterOptions or None, default = None
        Writer options. ``output_format="markdown"`` selects the
        MarkdownWriter; every other format selects the HtmlWriter.

    Returns
    -------
    BaseWriter
        A new writer instance that shares no state with other writers

    """
    options = options or WriterOptions()
    if options.output_format == OUTPUT_FORMAT_MARKDOWN:
        return MarkdownWriter(options)
    logger.debug(f"Using HTML writer for output format '{options.output_format}'")
    return HtmlWriter(options)


__all__ = [
    "BaseWriter",
    "HtmlWriter",
    "MarkdownWriter",
    "create_writer",
    "escape_markdown",
]
