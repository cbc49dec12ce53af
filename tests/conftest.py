from datetime import datetime

import pytest
import pytz

from vcal_compat import config as converter_config
from vcal_compat import UtcOffset


@pytest.fixture(autouse=True)
def debug_off():
    """Every test starts with debug output disabled."""
    converter_config.set_debug(False)
    yield
    converter_config.set_debug(False)


@pytest.fixture
def t0() -> datetime:
    return pytz.UTC.localize(datetime(2024, 6, 15, 9, 0))


@pytest.fixture
def t1() -> datetime:
    return pytz.UTC.localize(datetime(2024, 6, 15, 11, 0))


@pytest.fixture
def eastern_dst() -> UtcOffset:
    return UtcOffset(-4, 0)
