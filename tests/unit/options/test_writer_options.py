#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/options/test_writer_options.py
"""Unit tests for WriterOptions."""

from dataclasses import FrozenInstanceError

import pytest

from mdstream.options import WriterOptions


@pytest.mark.unit
class TestWriterOptions:
    """Tests for defaults, normalization and validation."""

    def test_defaults(self):
        options = WriterOptions()
        assert options.output_format == "html"
        assert options.preserve_as_html == frozenset()

    def test_preserve_as_html_is_normalized_to_frozenset(self):
        options = WriterOptions(preserve_as_html=["table", "img", "table"])
        assert options.preserve_as_html == frozenset({"table", "img"})

    def test_options_are_frozen(self):
        options = WriterOptions()
        with pytest.raises(FrozenInstanceError):
            options.output_format = "markdown"

    def test_create_updated_returns_modified_copy(self):
        options = WriterOptions(output_format="markdown")
        updated = options.create_updated(preserve_as_html=["pre"])
        assert updated.output_format == "markdown"
        assert updated.preserve_as_html == frozenset({"pre"})
        assert options.preserve_as_html == frozenset()

    def test_empty_output_format_is_rejected(self):
        with pytest.raises(ValueError, match="output_format"):
            WriterOptions(output_format="")

    def test_string_preserve_as_html_is_rejected(self):
        with pytest.raises(ValueError, match="preserve_as_html"):
            WriterOptions(preserve_as_html="table")

    def test_non_string_entries_are_rejected(self):
        with pytest.raises(ValueError, match="non-empty strings"):
            WriterOptions(preserve_as_html=["table", 3])
