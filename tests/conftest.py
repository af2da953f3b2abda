# tests/conftest.py
from datetime import datetime, timedelta, timezone

import pytest

from log_fixtures import PlaceholderCaseIds


@pytest.fixture
def epoch():
    return datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def hours():
    return lambda n: timedelta(hours=n)


@pytest.fixture
def fixed_ids():
    return PlaceholderCaseIds(42)
