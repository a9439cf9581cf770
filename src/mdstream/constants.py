#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for mdstream.

This module centralizes the literal types, default option values and the
fixed markup tokens used by the writers. Constants are organized by category:

1. Type Definitions - Literal types and type aliases
2. Writer Selection - Output formats and defaults
3. Markdown Tokens - Delimiters and separators emitted by the Markdown writer
4. Escaping - Characters that carry meaning in Markdown text
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

AnchorPosition = Literal["before", "after"]

# =============================================================================
# Writer Selection
# =============================================================================

OUTPUT_FORMAT_MARKDOWN = "markdown"
OUTPUT_FORMAT_HTML = "html"
OUTPUT_FORMATS: tuple[str, ...] = (OUTPUT_FORMAT_MARKDOWN, OUTPUT_FORMAT_HTML)

DEFAULT_OUTPUT_FORMAT = OUTPUT_FORMAT_HTML
DEFAULT_PRESERVE_AS_HTML: frozenset[str] = frozenset()

# =============================================================================
# Markdown Tokens
# =============================================================================

MARKDOWN_STRONG_DELIMITER = "__"
MARKDOWN_EMPHASIS_DELIMITER = "*"
MARKDOWN_BOLD_DELIMITER = "**"
MARKDOWN_CODE_FENCE = "```"
MARKDOWN_UNORDERED_BULLET = "-"
MARKDOWN_LIST_INDENT = "\t"
MARKDOWN_HARD_BREAK = "  \n"
MARKDOWN_BLOCK_SEPARATOR = "\n\n"
MARKDOWN_TABLE_CELL_SEPARATOR = "|"
MARKDOWN_TABLE_HEADER_SEGMENT = "-|"

# Inside a table everything for a row must stay on one line
TABLE_INLINE_SEPARATOR = " "
TABLE_LIST_ITEM_TERMINATOR = ";"

MAX_HEADING_LEVEL = 6

# =============================================================================
# Escaping
# =============================================================================

MARKDOWN_SPECIAL_CHARS = r"`*_{}[]()#+-.!"
