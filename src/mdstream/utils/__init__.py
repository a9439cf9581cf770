#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared helpers for mdstream writers."""
