import pytest
import sys
import os

# Add src to python path so we can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from RunOrRaise.Models import WindowInfo
from RunOrRaise.window_detection import QueryError, WindowSource


class FakeSource(WindowSource):
    """In-memory window source; a query given as an exception raises it."""

    def __init__(self, windows=None, focused=None):
        super().__init__()
        self.windows = windows
        self.focused = focused
        self.calls = []

    def list_windows(self):
        self.calls.append("list_windows")
        if isinstance(self.windows, Exception):
            raise self.windows
        return list(self.windows)

    def active_window(self):
        self.calls.append("active_window")
        if self.focused is None:
            raise QueryError("No window is focused")
        if isinstance(self.focused, Exception):
            raise self.focused
        return self.focused


@pytest.fixture
def make_window():
    """Factory for WindowInfo records with only the interesting fields set."""
    def _make(address="0x1", class_name="Firefox", **kwargs):
        return WindowInfo(address=address, class_name=class_name, **kwargs)
    return _make


@pytest.fixture
def fake_source():
    return FakeSource
