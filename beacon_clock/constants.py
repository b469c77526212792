from beacon_clock.typing import Second, Timestamp

SECONDS_PER_SLOT = Second(12)
SLOTS_PER_EPOCH = 32
SECONDS_PER_EPOCH = Second(SECONDS_PER_SLOT * SLOTS_PER_EPOCH)

# Seconds after the start of a slot within which attestations are expected.
ATTESTATION_DEADLINE = Second(4)

MAINNET_GENESIS = Timestamp(1606824023)
SEPOLIA_GENESIS = Timestamp(1655733600)
HOLESKY_GENESIS = Timestamp(1695902400)

TWO_POWER_64 = 2 ** 64
UINT64_MAX = TWO_POWER_64 - 1
