"""Configuration for decobox tests."""

import pytest

from .testing_utils import FakeHost


@pytest.fixture
def host():
    """Host measuring "Hello" as a 50×20 block and body items as 80×12."""
    return FakeHost({
        'Hello': (50, 20),
        'Title': (60, 16),
        'First': (80, 12),
        'Second': (80, 12),
        'Third': (80, 12),
        'Footer': (80, 14),
    })
