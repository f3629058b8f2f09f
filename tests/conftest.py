from __future__ import annotations

from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 10, 9, 0)
