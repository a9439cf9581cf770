#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for mdstream writers."""

from __future__ import annotations

from mdstream.options.base import CloneFrozenMixin, WriterOptions

__all__ = [
    "CloneFrozenMixin",
    "WriterOptions",
]
