from enum import Enum, unique
import logging
from typing import Dict, Optional, Tuple, Union

from beacon_clock.clock import SlotClock, _get_unix_time
from beacon_clock.configs import MAINNET_CONFIG, ClockConfig
from beacon_clock.constants import HOLESKY_GENESIS, MAINNET_GENESIS, SEPOLIA_GENESIS
from beacon_clock.exceptions import UnsupportedNetwork
from beacon_clock.info import EpochInfo, SlotInfo
from beacon_clock.typing import Epoch, Slot, Timestamp, TimeProvider

logger = logging.getLogger("beacon_clock.networks")


@unique
class Network(Enum):
    Mainnet = "mainnet"
    Sepolia = "sepolia"
    Holesky = "holesky"

    @classmethod
    def from_name(cls, name: str) -> "Network":
        try:
            return cls(name.lower())
        except (AttributeError, ValueError):
            raise UnsupportedNetwork(name, (network.value for network in cls)) from None


NetworkIdentifier = Union[Network, str]


GENESIS_TIMES: Dict[Network, Timestamp] = {
    Network.Mainnet: MAINNET_GENESIS,
    Network.Sepolia: SEPOLIA_GENESIS,
    Network.Holesky: HOLESKY_GENESIS,
}


class NetworkRegistry:
    """
    Resolves a known network to its genesis time and answers slot clock
    queries on its behalf.
    """

    def __init__(
        self,
        genesis_times: Optional[Dict[Network, Timestamp]] = None,
        config: ClockConfig = MAINNET_CONFIG,
        time_provider: TimeProvider = _get_unix_time,
    ) -> None:
        if genesis_times is None:
            genesis_times = GENESIS_TIMES
        self._genesis_times = dict(genesis_times)
        self._config = config
        self._time_provider = time_provider

    def _resolve(self, network: NetworkIdentifier) -> Network:
        if isinstance(network, Network):
            resolved = network
        elif isinstance(network, str):
            resolved = Network.from_name(network)
        else:
            raise UnsupportedNetwork(network, self.supported_networks())

        if resolved not in self._genesis_times:
            raise UnsupportedNetwork(network, self.supported_networks())
        return resolved

    def supported_networks(self) -> Tuple[str, ...]:
        return tuple(network.value for network in self._genesis_times)

    def genesis_time_of(self, network: NetworkIdentifier) -> Timestamp:
        try:
            resolved = self._resolve(network)
        except UnsupportedNetwork:
            logger.warning("lookup of unsupported network %r", network)
            raise
        genesis_time = self._genesis_times[resolved]
        logger.debug("resolved network %s to genesis time %d", resolved.value, genesis_time)
        return genesis_time

    def clock_for(self, network: NetworkIdentifier) -> SlotClock:
        return SlotClock.from_config(
            self._config,
            self.genesis_time_of(network),
            time_provider=self._time_provider,
        )

    def current_slot_of(self, network: NetworkIdentifier) -> Slot:
        return self.clock_for(network).get_current_slot()

    def current_epoch_of(self, network: NetworkIdentifier) -> Epoch:
        return self.clock_for(network).get_current_epoch()

    def slot_info_of(self, network: NetworkIdentifier) -> SlotInfo:
        """
        Snapshot of the network's current slot.
        """
        return self.clock_for(network).get_current_slot_info()

    def epoch_info_of(self, network: NetworkIdentifier, epoch: Epoch) -> EpochInfo:
        return self.clock_for(network).get_epoch_info(epoch)
