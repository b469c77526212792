from dataclasses import dataclass
from typing import NamedTuple

from beacon_clock.typing import Epoch, Slot, Timestamp


class EpochBounds(NamedTuple):
    first_slot: Slot
    last_slot: Slot


class SlotRange(NamedTuple):
    start_slot: Slot
    end_slot: Slot
    count: int


@dataclass(eq=True, frozen=True)
class SlotInfo:
    """
    A snapshot of a slot's position in the schedule.

    ``is_active`` and ``in_attestation_window`` describe the instant the
    snapshot was taken; ``in_attestation_window`` is only ``True`` while the
    slot is also the active one.
    """

    slot: Slot
    epoch: Epoch
    slot_in_epoch: int
    start_time: Timestamp
    end_time: Timestamp
    is_active: bool
    in_attestation_window: bool

    def __repr__(self) -> str:
        return (
            f"SlotInfo({self.epoch},{self.slot},{self.slot_in_epoch},"
            f"active={self.is_active},attesting={self.in_attestation_window})"
        )


@dataclass(eq=True, frozen=True)
class EpochInfo:
    epoch: Epoch
    first_slot: Slot
    last_slot: Slot
    start_time: Timestamp
    end_time: Timestamp

    def __repr__(self) -> str:
        return f"EpochInfo({self.epoch},{self.first_slot}..{self.last_slot})"

    @property
    def slot_count(self) -> int:
        return self.last_slot - self.first_slot + 1
