from eth_utils import ValidationError

from beacon_clock.constants import UINT64_MAX
from beacon_clock.exceptions import SlotArithmeticOverflow


def validate_uint64(value: int, title: str = "Value") -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{title} must be an integer: got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{title} must be non-negative: got {value}")
    if value > UINT64_MAX:
        raise ValidationError(f"{title} does not fit in a uint64: got {value}")


def checked_uint64(value: int, operation: str) -> int:
    """
    Return ``value`` unchanged if it is representable as a uint64, otherwise
    raise ``SlotArithmeticOverflow`` naming ``operation``.
    """
    if value > UINT64_MAX:
        raise SlotArithmeticOverflow(operation, value)
    return value
