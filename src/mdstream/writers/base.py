#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/writers/base.py
"""Base class for event writers.

A writer is driven by an ordered stream of element lifecycle events and
accumulates output fragments as it goes. The producer of the events decides
which elements to open and with which attributes; a writer only decides how
each event is spelled in its output format.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from mdstream.exceptions import InvalidOptionsError
from mdstream.options.base import WriterOptions


class BaseWriter(ABC):
    """Abstract base class for all event writers.

    Parameters
    ----------
    options : WriterOptions or None, default = None
        Writer configuration. If None, default options are used.

    Notes
    -----
    Every writer instance owns all of its state. Serializing several
    documents concurrently requires one writer per document.

    Examples
    --------
    Driving a writer:

        >>> from mdstream.writers import create_writer
        >>> from mdstream.options import WriterOptions
        >>> writer = create_writer(WriterOptions(output_format="markdown"))
        >>> writer.open("h1")
        >>> writer.text("Title")
        >>> writer.close()
        >>> writer.as_string()
        '# Title\\n\\n'

    """

    def __init__(self, options: WriterOptions | None = None):
        """Initialize the writer with optional configuration."""
        self._validate_options_type(options, WriterOptions, self.__class__.__name__)
        self.options: WriterOptions = options or WriterOptions()
        self._fragments: list[str] = []

    @abstractmethod
    def open(self, tag_name: str, attributes: Mapping[str, str] | None = None) -> None:
        """Write the start of an element.

        Parameters
        ----------
        tag_name : str
            Element kind, e.g. ``"p"`` or ``"h2"``
        attributes : Mapping[str, str] or None
            Element attributes; unknown keys are ignored

        """

    @abstractmethod
    def close(self) -> None:
        """Write the end of the most recently opened, still open element."""

    @abstractmethod
    def text(self, value: str) -> None:
        """Write text content."""

    def self_closing(self, tag_name: str, attributes: Mapping[str, str] | None = None) -> None:
        """Write an element that has no content.

        Equivalent to ``open`` immediately followed by ``close``.
        """
        self.open(tag_name, attributes)
        self.close()

    def as_string(self) -> str:
        """Return the concatenation of everything written so far.

        May be called at any point, including while elements are still open.
        """
        return "".join(self._fragments)

    @staticmethod
    def _validate_options_type(options: WriterOptions | None, expected_type: type, writer_name: str) -> None:
        """Validate that options are of the correct type for this writer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                writer_name=writer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
