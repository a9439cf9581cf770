#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the event writers.

This module defines the frozen dataclass that selects and configures a
writer. The same options object is handed to ``create_writer`` and to the
writer it returns.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdstream.constants import DEFAULT_OUTPUT_FORMAT, DEFAULT_PRESERVE_AS_HTML, OUTPUT_FORMATS


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class WriterOptions(CloneFrozenMixin):
    """Options recognised when a writer is constructed.

    Parameters
    ----------
    output_format : str, default "html"
        ``"markdown"`` selects the Markdown writer. Any other value selects
        the HTML writer, which emits the element events as markup unchanged.
    preserve_as_html : Iterable[str], default empty
        Element kinds that the Markdown writer emits as literal HTML tags,
        together with their whole subtree. Normalized to a ``frozenset``.

    Examples
    --------
        >>> options = WriterOptions(output_format="markdown", preserve_as_html=["table"])
        >>> "table" in options.preserve_as_html
        True

    """

    output_format: str = field(
        default=DEFAULT_OUTPUT_FORMAT,
        metadata={
            "help": "Output format of the writer ('markdown' or 'html')",
            "choices": list(OUTPUT_FORMATS),
            "importance": "core",
        },
    )
    preserve_as_html: frozenset[str] = field(
        default=DEFAULT_PRESERVE_AS_HTML,
        metadata={
            "help": "Element kinds written as literal HTML (with their subtree) by the Markdown writer",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Normalize and validate option values.

        Raises
        ------
        ValueError
            If ``output_format`` is empty or an element kind in
            ``preserve_as_html`` is not a non-empty string.

        """
        if not isinstance(self.output_format, str) or not self.output_format:
            raise ValueError(f"output_format must be a non-empty string, got {self.output_format!r}")

        kinds = self.preserve_as_html
        if isinstance(kinds, str) or not isinstance(kinds, Iterable):
            raise ValueError(f"preserve_as_html must be a collection of element names, got {kinds!r}")
        normalized = frozenset(kinds)
        for kind in normalized:
            if not isinstance(kind, str) or not kind:
                raise ValueError(f"preserve_as_html entries must be non-empty strings, got {kind!r}")

        # frozen dataclass; bypass __setattr__
        object.__setattr__(self, "preserve_as_html", normalized)
