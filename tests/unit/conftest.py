"""Shared fixtures for unit tests."""

import pytest

from tests.unit.helpers import RecordingSender


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()
