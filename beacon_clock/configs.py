from dataclasses import Field, dataclass, fields
from typing import Collection, Dict, Iterable, Tuple, Union

from cached_property import cached_property
from eth_utils import ValidationError, to_dict

from beacon_clock.constants import ATTESTATION_DEADLINE, SECONDS_PER_SLOT, SLOTS_PER_EPOCH
from beacon_clock.typing import Second

ConfigTypes = Union[Second, int]
EncodedConfigTypes = Union[str, int]


@to_dict
def _decoder(
    # NOTE: mypy incorrectly thinks `Field` is a generic type
    data: Dict[str, EncodedConfigTypes],
    fields: Collection[Field],  # type: ignore
) -> Iterable[Tuple[str, ConfigTypes]]:
    for field in fields:
        if field.name not in data:
            raise ValidationError(f"Missing clock configuration value: {field.name}")
        raw_value = data[field.name]
        if isinstance(raw_value, bool) or not isinstance(raw_value, (int, str)):
            raise ValidationError(
                f"Clock configuration value {field.name} is not an integer: {raw_value!r}"
            )
        try:
            value = int(raw_value)
        except ValueError as err:
            raise ValidationError(
                f"Clock configuration value {field.name} is not an integer: {raw_value!r}"
            ) from err
        if field.type is Second:
            yield field.name, Second(value)
        else:
            yield field.name, value


@dataclass(eq=True, frozen=True)
class ClockConfig:
    """
    The protocol constants that shape the slot schedule of a network.
    """

    SECONDS_PER_SLOT: Second
    SLOTS_PER_EPOCH: int
    ATTESTATION_DEADLINE: Second

    def __post_init__(self) -> None:
        if self.SECONDS_PER_SLOT <= 0:
            raise ValidationError(
                f"SECONDS_PER_SLOT must be positive: got {self.SECONDS_PER_SLOT}"
            )
        if self.SLOTS_PER_EPOCH <= 0:
            raise ValidationError(
                f"SLOTS_PER_EPOCH must be positive: got {self.SLOTS_PER_EPOCH}"
            )
        if not 0 <= self.ATTESTATION_DEADLINE <= self.SECONDS_PER_SLOT:
            raise ValidationError(
                "ATTESTATION_DEADLINE must lie within a slot: "
                f"got {self.ATTESTATION_DEADLINE} for a {self.SECONDS_PER_SLOT}s slot"
            )

    @cached_property
    def seconds_per_epoch(self) -> Second:
        return Second(self.SECONDS_PER_SLOT * self.SLOTS_PER_EPOCH)

    @to_dict
    def to_formatted_dict(self) -> Iterable[Tuple[str, EncodedConfigTypes]]:
        for field in fields(self):
            yield field.name, getattr(self, field.name)

    @classmethod
    def from_formatted_dict(cls, data: Dict[str, EncodedConfigTypes]) -> "ClockConfig":
        # NOTE: mypy does not recognize the kwarg unpacking here...
        return cls(**_decoder(data, fields(cls)))  # type: ignore


MAINNET_CONFIG = ClockConfig(
    SECONDS_PER_SLOT=SECONDS_PER_SLOT,
    SLOTS_PER_EPOCH=SLOTS_PER_EPOCH,
    ATTESTATION_DEADLINE=ATTESTATION_DEADLINE,
)
