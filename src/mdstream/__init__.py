#  Copyright (c) 2025 Tom Villani, Ph.D.
"""mdstream - streaming Markdown writer for element event streams.

mdstream converts an ordered sequence of element lifecycle events (open tag
with attributes, text, close tag, self-closing tag) into Markdown. The
producer of the events walks its own document structure; mdstream only
decides how each event is spelled.

Key Features
------------
- Paragraphs, headings, emphasis, links, images and code
- Nested ordered and unordered lists with numbering that resumes correctly
- Tables with a header separator sized to the first row
- Anchors for elements carrying an ``id``
- Passthrough of selected element kinds as literal HTML
- An HTML writer sharing the same event interface

Examples
--------
    >>> from mdstream import WriterOptions, create_writer
    >>> writer = create_writer(WriterOptions(output_format="markdown"))
    >>> writer.open("ol")
    >>> writer.open("li")
    >>> writer.text("First")
    >>> writer.close()
    >>> writer.close()
    >>> writer.as_string()
    '1. First\\n\\n'

"""

from __future__ import annotations

from mdstream.exceptions import (
    InvalidOptionsError,
    MdStreamError,
    RenderingError,
    UnbalancedElementError,
    ValidationError,
)
from mdstream.options import WriterOptions
from mdstream.writers import BaseWriter, HtmlWriter, MarkdownWriter, create_writer, escape_markdown

__version__ = "0.1.0"

__all__ = [
    "BaseWriter",
    "HtmlWriter",
    "InvalidOptionsError",
    "MarkdownWriter",
    "MdStreamError",
    "RenderingError",
    "UnbalancedElementError",
    "ValidationError",
    "WriterOptions",
    "create_writer",
    "escape_markdown",
    "__version__",
]
