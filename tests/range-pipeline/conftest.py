import os
import sys

import pytest

# Ensure tests/range-pipeline/ is on sys.path so test files can import
# fake_editor unambiguously.
sys.path.insert(0, os.path.dirname(__file__))

from fake_editor import FakeEditor  # noqa: E402, F401


def pytest_collection_modifyitems(items):
    for item in items:
        if "range-pipeline" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
