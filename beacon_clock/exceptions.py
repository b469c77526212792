from typing import Any, Iterable


class BaseBeaconClockError(Exception):
    """
    The base class for all ``beacon_clock`` errors.
    """
    pass


class UnsupportedNetwork(BaseBeaconClockError, ValueError):
    """
    Raised when a network identifier is outside the set of known networks.
    """

    def __init__(self, network: Any, supported: Iterable[str]) -> None:
        self.network = network
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported network: {network!r}. "
            f"Supported networks: {', '.join(self.supported)}"
        )


class SlotArithmeticOverflow(BaseBeaconClockError, OverflowError):
    """
    Raised when the result of a slot, epoch or timestamp computation does
    not fit in a uint64.
    """

    def __init__(self, operation: str, value: int) -> None:
        self.operation = operation
        self.value = value
        super().__init__(f"{operation} overflows uint64: {value}")
