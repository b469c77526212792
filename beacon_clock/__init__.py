from beacon_clock.clock import SlotClock  # noqa: F401
from beacon_clock.configs import MAINNET_CONFIG, ClockConfig  # noqa: F401
from beacon_clock.constants import (  # noqa: F401
    ATTESTATION_DEADLINE,
    HOLESKY_GENESIS,
    MAINNET_GENESIS,
    SECONDS_PER_EPOCH,
    SECONDS_PER_SLOT,
    SEPOLIA_GENESIS,
    SLOTS_PER_EPOCH,
)
from beacon_clock.exceptions import (  # noqa: F401
    BaseBeaconClockError,
    SlotArithmeticOverflow,
    UnsupportedNetwork,
)
from beacon_clock.info import EpochBounds, EpochInfo, SlotInfo, SlotRange  # noqa: F401
from beacon_clock.networks import GENESIS_TIMES, Network, NetworkRegistry  # noqa: F401
