import pytest

from beacon_clock.clock import SlotClock
from beacon_clock.configs import MAINNET_CONFIG
from beacon_clock.networks import NetworkRegistry


class FakeTime:
    """
    A settable ``time_provider``.
    """

    def __init__(self, t):
        self.t = t

    def __call__(self):
        return self.t


@pytest.fixture
def genesis_time():
    return 1606824023


@pytest.fixture
def config():
    return MAINNET_CONFIG


@pytest.fixture
def fake_time(genesis_time):
    return FakeTime(genesis_time)


@pytest.fixture
def clock(genesis_time, config, fake_time):
    return SlotClock(genesis_time, config=config, time_provider=fake_time)


@pytest.fixture
def registry(config, fake_time):
    return NetworkRegistry(config=config, time_provider=fake_time)
