"""
CLI Test Fixtures.

The CLI configures root logging against CliRunner's captured streams,
which are closed after each invoke.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_root_handlers():
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
