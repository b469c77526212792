"""
Pure slot, epoch and timestamp arithmetic.

Every function here is a total function of its explicit arguments: the
genesis time, the protocol constants and, for the time-dependent predicates,
the current time are all passed in by the caller. ``SlotClock`` binds these
arguments once and forwards to the functions below.
"""
import logging
from typing import Tuple

from beacon_clock._utils.numeric import checked_uint64, validate_uint64
from beacon_clock.typing import Epoch, Second, Slot, Timestamp

logger = logging.getLogger("beacon_clock.helpers")


#
# Slot <-> epoch
#

def compute_epoch_at_slot(slot: Slot, slots_per_epoch: int) -> Epoch:
    validate_uint64(slot, "Slot")
    return Epoch(slot // slots_per_epoch)


def compute_slot_in_epoch(slot: Slot, slots_per_epoch: int) -> int:
    validate_uint64(slot, "Slot")
    return slot % slots_per_epoch


def compute_start_slot_at_epoch(epoch: Epoch, slots_per_epoch: int) -> Slot:
    validate_uint64(epoch, "Epoch")
    return Slot(checked_uint64(epoch * slots_per_epoch, "start slot of epoch"))


def compute_last_slot_at_epoch(epoch: Epoch, slots_per_epoch: int) -> Slot:
    start_slot = compute_start_slot_at_epoch(epoch, slots_per_epoch)
    return Slot(checked_uint64(start_slot + slots_per_epoch - 1, "last slot of epoch"))


def compute_epoch_bounds(epoch: Epoch, slots_per_epoch: int) -> Tuple[Slot, Slot]:
    return (
        compute_start_slot_at_epoch(epoch, slots_per_epoch),
        compute_last_slot_at_epoch(epoch, slots_per_epoch),
    )


#
# Slot <-> time
#

def compute_slot_start_time(
    slot: Slot, genesis_time: Timestamp, seconds_per_slot: Second
) -> Timestamp:
    validate_uint64(slot, "Slot")
    validate_uint64(genesis_time, "Genesis time")
    return Timestamp(
        checked_uint64(genesis_time + slot * seconds_per_slot, "slot start time")
    )


def compute_slot_end_time(
    slot: Slot, genesis_time: Timestamp, seconds_per_slot: Second
) -> Timestamp:
    validate_uint64(slot, "Slot")
    validate_uint64(genesis_time, "Genesis time")
    return Timestamp(
        checked_uint64(genesis_time + (slot + 1) * seconds_per_slot, "slot end time")
    )


def compute_slot_at_time(
    t: Timestamp, genesis_time: Timestamp, seconds_per_slot: Second
) -> Slot:
    """
    Return the slot whose interval contains the unix time ``t``.

    Any time at or before ``genesis_time`` maps to slot 0.
    """
    validate_uint64(t, "Time")
    validate_uint64(genesis_time, "Genesis time")
    if t <= genesis_time:
        if t < genesis_time:
            logger.debug(
                "time %d precedes genesis time %d; clamping to slot 0", t, genesis_time
            )
        return Slot(0)
    return Slot((t - genesis_time) // seconds_per_slot)


def compute_seconds_into_slot(
    t: Timestamp, genesis_time: Timestamp, seconds_per_slot: Second
) -> Second:
    validate_uint64(t, "Time")
    validate_uint64(genesis_time, "Genesis time")
    if t <= genesis_time:
        return Second(0)
    return Second((t - genesis_time) % seconds_per_slot)


def compute_slots_in_time_range(
    start_time: Timestamp,
    end_time: Timestamp,
    genesis_time: Timestamp,
    seconds_per_slot: Second,
) -> Tuple[Slot, Slot, int]:
    """
    Return ``(start_slot, end_slot, count)`` for the slots overlapping the time
    range ``[start_time, end_time]``.

    The start of the range is inclusive even when it falls on a slot boundary.
    An ``end_time`` that falls exactly on the start of a slot does not pull
    that slot into the range. An inverted range yields ``(0, 0, 0)``.
    """
    validate_uint64(start_time, "Start time")
    validate_uint64(end_time, "End time")
    if start_time > end_time:
        return Slot(0), Slot(0), 0

    start_slot = compute_slot_at_time(start_time, genesis_time, seconds_per_slot)
    end_slot = compute_slot_at_time(end_time, genesis_time, seconds_per_slot)

    if (
        end_slot > 0
        and end_time == compute_slot_start_time(end_slot, genesis_time, seconds_per_slot)
    ):
        end_slot = Slot(end_slot - 1)

    if end_slot >= start_slot:
        count = end_slot - start_slot + 1
    else:
        count = 0
    return start_slot, end_slot, count


#
# Time-dependent predicates
#

def compute_time_until_slot(
    slot: Slot, genesis_time: Timestamp, seconds_per_slot: Second, now: Timestamp
) -> int:
    """
    Signed number of seconds from ``now`` until the start of ``slot``; negative
    once the slot has started.
    """
    validate_uint64(now, "Current time")
    return compute_slot_start_time(slot, genesis_time, seconds_per_slot) - now


def is_slot_active_at(
    slot: Slot, genesis_time: Timestamp, seconds_per_slot: Second, now: Timestamp
) -> bool:
    validate_uint64(now, "Current time")
    start_time = compute_slot_start_time(slot, genesis_time, seconds_per_slot)
    end_time = compute_slot_end_time(slot, genesis_time, seconds_per_slot)
    return start_time <= now < end_time


def is_in_attestation_window_at(
    slot: Slot,
    genesis_time: Timestamp,
    seconds_per_slot: Second,
    attestation_deadline: Second,
    now: Timestamp,
) -> bool:
    """
    Check whether ``now`` lies within ``attestation_deadline`` seconds
    (inclusive) of the start of ``slot``.

    Only the offset from the start of ``slot`` is considered; pair this with
    ``is_slot_active_at`` to also require that ``slot`` is the current slot.
    """
    validate_uint64(now, "Current time")
    start_time = compute_slot_start_time(slot, genesis_time, seconds_per_slot)
    return now >= start_time and now - start_time <= attestation_deadline


#
# Presentation
#

def format_slot(slot: Slot, slots_per_epoch: int) -> str:
    epoch = compute_epoch_at_slot(slot, slots_per_epoch)
    slot_in_epoch = compute_slot_in_epoch(slot, slots_per_epoch)
    return f"Slot {slot} (Epoch {epoch}, Slot {slot_in_epoch}/{slots_per_epoch - 1})"
