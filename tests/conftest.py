"""Shared pytest fixtures and configuration for the typed-input test suite.

Guidelines
----------
* No real terminal interaction — streams are always injected or
  monkeypatched.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import io
import sys

import pytest


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch):
    """Replace ``sys.stdin`` with a ``StringIO`` holding the given text."""

    def _feed(text: str) -> io.StringIO:
        stream = io.StringIO(text)
        monkeypatch.setattr(sys, "stdin", stream)
        return stream

    return _feed
