"""Pytest configuration and shared fixtures for the mdstream test suite."""

import os

import pytest

from mdstream.options import WriterOptions
from mdstream.writers import MarkdownWriter

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, property tests will fail to import
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")


@pytest.fixture
def markdown_writer() -> MarkdownWriter:
    """Provide a Markdown writer with default options."""
    return MarkdownWriter(WriterOptions(output_format="markdown"))
