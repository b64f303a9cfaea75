"""Shared test fixtures."""

import pytest

from mstime import DateTime, TimeSpan


@pytest.fixture
def sample_datetime():
    return DateTime.from_fields(2022, 1, 31, 12, 34, 56, 789)


@pytest.fixture
def sample_timespan():
    return TimeSpan.of(1, 2, 3, 4, 5)


@pytest.fixture
def buffer():
    return bytearray(64)
