import logging
import time

from beacon_clock import helpers
from beacon_clock._utils.numeric import validate_uint64
from beacon_clock.configs import MAINNET_CONFIG, ClockConfig
from beacon_clock.info import EpochBounds, EpochInfo, SlotInfo, SlotRange
from beacon_clock.typing import Epoch, Second, Slot, Timestamp, TimeProvider


def _get_unix_time() -> float:
    return time.time()


class SlotClock:
    """
    Converts between unix time, slots and epochs for a network with the given
    ``genesis_time``.

    The clock holds no mutable state. Queries about "now" read the injected
    ``time_provider``; every other query is a pure function of its arguments.
    """

    logger = logging.getLogger("beacon_clock.clock")

    def __init__(
        self,
        genesis_time: Timestamp,
        config: ClockConfig = MAINNET_CONFIG,
        time_provider: TimeProvider = _get_unix_time,
    ) -> None:
        validate_uint64(genesis_time, "Genesis time")
        self._genesis_time = genesis_time
        self._config = config
        self._seconds_per_slot = config.SECONDS_PER_SLOT
        self._slots_per_epoch = config.SLOTS_PER_EPOCH
        self._attestation_deadline = config.ATTESTATION_DEADLINE
        self._time_provider = time_provider
        self.logger.debug(
            "slot clock with genesis time %d, %ds slots and %d slots per epoch",
            genesis_time,
            self._seconds_per_slot,
            self._slots_per_epoch,
        )

    @classmethod
    def from_config(
        cls,
        config: ClockConfig,
        genesis_time: Timestamp,
        time_provider: TimeProvider = _get_unix_time,
    ) -> "SlotClock":
        return cls(genesis_time, config=config, time_provider=time_provider)

    def __repr__(self) -> str:
        return f"SlotClock(genesis_time={self._genesis_time})"

    @property
    def genesis_time(self) -> Timestamp:
        return self._genesis_time

    @property
    def config(self) -> ClockConfig:
        return self._config

    def now(self) -> Timestamp:
        """
        The current unix time, truncated to whole seconds.
        """
        return Timestamp(int(self._time_provider()))

    #
    # Slot <-> epoch
    #
    def slot_to_epoch(self, slot: Slot) -> Epoch:
        return helpers.compute_epoch_at_slot(slot, self._slots_per_epoch)

    def slot_in_epoch(self, slot: Slot) -> int:
        return helpers.compute_slot_in_epoch(slot, self._slots_per_epoch)

    def epoch_to_first_slot(self, epoch: Epoch) -> Slot:
        return helpers.compute_start_slot_at_epoch(epoch, self._slots_per_epoch)

    def epoch_to_last_slot(self, epoch: Epoch) -> Slot:
        return helpers.compute_last_slot_at_epoch(epoch, self._slots_per_epoch)

    def get_epoch_bounds(self, epoch: Epoch) -> EpochBounds:
        return EpochBounds(*helpers.compute_epoch_bounds(epoch, self._slots_per_epoch))

    #
    # Slot <-> time
    #
    def get_slot_start_time(self, slot: Slot) -> Timestamp:
        return helpers.compute_slot_start_time(
            slot, self._genesis_time, self._seconds_per_slot
        )

    def get_slot_end_time(self, slot: Slot) -> Timestamp:
        return helpers.compute_slot_end_time(
            slot, self._genesis_time, self._seconds_per_slot
        )

    def get_slot_at_time(self, t: Timestamp) -> Slot:
        return helpers.compute_slot_at_time(t, self._genesis_time, self._seconds_per_slot)

    def get_epoch_at_time(self, t: Timestamp) -> Epoch:
        return self.slot_to_epoch(self.get_slot_at_time(t))

    def get_epoch_start_time(self, epoch: Epoch) -> Timestamp:
        return self.get_slot_start_time(self.epoch_to_first_slot(epoch))

    def get_epoch_end_time(self, epoch: Epoch) -> Timestamp:
        return self.get_slot_end_time(self.epoch_to_last_slot(epoch))

    def seconds_into_slot(self, t: Timestamp) -> Second:
        return helpers.compute_seconds_into_slot(
            t, self._genesis_time, self._seconds_per_slot
        )

    def get_slots_in_time_range(
        self, start_time: Timestamp, end_time: Timestamp
    ) -> SlotRange:
        return SlotRange(
            *helpers.compute_slots_in_time_range(
                start_time, end_time, self._genesis_time, self._seconds_per_slot
            )
        )

    #
    # Queries against the current time
    #
    def get_current_slot(self) -> Slot:
        return self.get_slot_at_time(self.now())

    def get_current_epoch(self) -> Epoch:
        return self.slot_to_epoch(self.get_current_slot())

    def get_time_until_slot(self, slot: Slot) -> int:
        return helpers.compute_time_until_slot(
            slot, self._genesis_time, self._seconds_per_slot, self.now()
        )

    def is_slot_active(self, slot: Slot) -> bool:
        return helpers.is_slot_active_at(
            slot, self._genesis_time, self._seconds_per_slot, self.now()
        )

    def is_in_attestation_window(self, slot: Slot) -> bool:
        """
        Whether the current time is within the attestation deadline of the
        start of ``slot``. This does not check that ``slot`` is still the
        active slot; see ``get_slot_info`` for the combined check.
        """
        return helpers.is_in_attestation_window_at(
            slot,
            self._genesis_time,
            self._seconds_per_slot,
            self._attestation_deadline,
            self.now(),
        )

    def get_slot_info(self, slot: Slot) -> SlotInfo:
        return self.get_slot_info_at(slot, self.now())

    def get_current_slot_info(self) -> SlotInfo:
        # read the clock once so the slot and its time-dependent fields agree
        now = self.now()
        return self.get_slot_info_at(self.get_slot_at_time(now), now)

    def get_slot_info_at(self, slot: Slot, now: Timestamp) -> SlotInfo:
        """
        Snapshot of ``slot`` as seen at the unix time ``now``.
        """
        is_active = helpers.is_slot_active_at(
            slot, self._genesis_time, self._seconds_per_slot, now
        )
        in_attestation_window = is_active and helpers.is_in_attestation_window_at(
            slot,
            self._genesis_time,
            self._seconds_per_slot,
            self._attestation_deadline,
            now,
        )
        return SlotInfo(
            slot=slot,
            epoch=self.slot_to_epoch(slot),
            slot_in_epoch=self.slot_in_epoch(slot),
            start_time=self.get_slot_start_time(slot),
            end_time=self.get_slot_end_time(slot),
            is_active=is_active,
            in_attestation_window=in_attestation_window,
        )

    def get_epoch_info(self, epoch: Epoch) -> EpochInfo:
        first_slot, last_slot = self.get_epoch_bounds(epoch)
        return EpochInfo(
            epoch=epoch,
            first_slot=first_slot,
            last_slot=last_slot,
            start_time=self.get_slot_start_time(first_slot),
            end_time=self.get_slot_end_time(last_slot),
        )

    def format_slot(self, slot: Slot) -> str:
        return helpers.format_slot(slot, self._slots_per_epoch)
