import pytest

from beacon_clock.clock import SlotClock
from beacon_clock.configs import ClockConfig
from beacon_clock.info import EpochInfo, SlotInfo


def test_clock_conversions(clock, genesis_time):
    assert clock.slot_to_epoch(31) == 0
    assert clock.slot_to_epoch(32) == 1
    assert clock.slot_in_epoch(32) == 0
    assert clock.epoch_to_first_slot(5) == 160
    assert clock.epoch_to_last_slot(5) == 191
    assert clock.get_epoch_bounds(5) == (160, 191)
    assert clock.get_epoch_bounds(5).last_slot == 191

    assert clock.get_slot_start_time(10) == genesis_time + 120
    assert clock.get_slot_end_time(10) == genesis_time + 132
    assert clock.get_slot_at_time(genesis_time + 131) == 10
    assert clock.get_slot_at_time(genesis_time - 1000) == 0
    assert clock.get_epoch_at_time(genesis_time + 384) == 1
    assert clock.get_epoch_start_time(1) == genesis_time + 384
    assert clock.get_epoch_end_time(1) == genesis_time + 768
    assert clock.seconds_into_slot(genesis_time + 131) == 11


def test_clock_slots_in_time_range(clock, genesis_time):
    slot_range = clock.get_slots_in_time_range(genesis_time + 24, genesis_time + 66)
    assert slot_range == (2, 5, 4)
    assert slot_range.count == 4

    assert clock.get_slots_in_time_range(genesis_time + 100, genesis_time + 50) == (0, 0, 0)
    assert clock.get_slots_in_time_range(genesis_time, genesis_time + 5) == (0, 0, 1)


@pytest.mark.parametrize(
    "offset, expected_slot",
    (
        (-12, 0),
        (0, 0),
        (11, 0),
        (12, 1),
        (383, 31),
        (384, 32),
    ),
)
def test_clock_current_slot(clock, fake_time, genesis_time, offset, expected_slot):
    fake_time.t = genesis_time + offset
    assert clock.get_current_slot() == expected_slot
    assert clock.get_current_epoch() == expected_slot // 32


def test_clock_truncates_fractional_time(clock, fake_time, genesis_time):
    fake_time.t = genesis_time + 11.999
    assert clock.now() == genesis_time + 11
    assert clock.get_current_slot() == 0


def test_clock_time_until_slot(clock, fake_time, genesis_time):
    fake_time.t = genesis_time + 30
    assert clock.get_time_until_slot(5) == 30
    assert clock.get_time_until_slot(2) == -6
    assert clock.get_time_until_slot(0) == -30


def test_clock_slot_info_while_active(clock, fake_time, genesis_time):
    fake_time.t = genesis_time + 12 * 33 + 3
    info = clock.get_slot_info(33)

    assert info == SlotInfo(
        slot=33,
        epoch=1,
        slot_in_epoch=1,
        start_time=genesis_time + 396,
        end_time=genesis_time + 408,
        is_active=True,
        in_attestation_window=True,
    )
    assert repr(info) == "SlotInfo(1,33,1,active=True,attesting=True)"


def test_clock_slot_info_after_attestation_deadline(clock, fake_time, genesis_time):
    fake_time.t = clock.get_slot_start_time(7) + 5
    info = clock.get_slot_info(7)

    assert info.is_active
    assert not info.in_attestation_window


def test_clock_slot_info_requires_active_slot_for_attestation_window():
    # a deadline that runs past the end of the slot
    config = ClockConfig(SECONDS_PER_SLOT=12, SLOTS_PER_EPOCH=32, ATTESTATION_DEADLINE=12)
    genesis_time = 1000
    clock = SlotClock(genesis_time, config=config, time_provider=lambda: 1000 + 12)

    assert clock.is_in_attestation_window(0)
    assert not clock.is_slot_active(0)

    info = clock.get_slot_info(0)
    assert not info.is_active
    assert not info.in_attestation_window


def test_clock_slot_info_for_future_slot(clock, fake_time, genesis_time):
    fake_time.t = genesis_time
    info = clock.get_slot_info(100)

    assert not info.is_active
    assert not info.in_attestation_window
    assert not clock.is_in_attestation_window(100)


def test_clock_epoch_info(clock, genesis_time):
    info = clock.get_epoch_info(5)

    assert info == EpochInfo(
        epoch=5,
        first_slot=160,
        last_slot=191,
        start_time=genesis_time + 160 * 12,
        end_time=genesis_time + 192 * 12,
    )
    assert info.end_time - info.start_time == 384
    assert info.slot_count == 32


def test_clock_format_slot(clock):
    assert clock.format_slot(0) == "Slot 0 (Epoch 0, Slot 0/31)"
    assert clock.format_slot(65) == "Slot 65 (Epoch 2, Slot 1/31)"


def test_clock_from_config(config, genesis_time):
    clock = SlotClock.from_config(config, genesis_time, time_provider=lambda: genesis_time)
    assert clock.genesis_time == genesis_time
    assert clock.config is config
    assert clock.get_current_slot() == 0


def test_clock_with_custom_config():
    config = ClockConfig(SECONDS_PER_SLOT=5, SLOTS_PER_EPOCH=16, ATTESTATION_DEADLINE=2)
    clock = SlotClock(1638993340, config=config)

    assert clock.get_epoch_bounds(2) == (32, 47)
    assert clock.get_slot_at_time(1638993340 + 26) == 5
    assert clock.format_slot(17) == "Slot 17 (Epoch 1, Slot 1/15)"


def test_clock_current_slot_info_reads_the_clock_once(genesis_time):
    readings = iter((genesis_time + 23, genesis_time + 24))
    clock = SlotClock(genesis_time, time_provider=lambda: next(readings))

    info = clock.get_current_slot_info()

    assert info.slot == 1
    assert info.is_active
    # the second reading was never taken
    assert clock.now() == genesis_time + 24


def test_clock_slot_info_at(clock, genesis_time):
    info = clock.get_slot_info_at(3, genesis_time + 36)
    assert info.is_active
    assert info.in_attestation_window

    assert not clock.get_slot_info_at(3, genesis_time + 48).is_active
