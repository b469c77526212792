from typing import Callable, NewType

Slot = NewType("Slot", int)  # uint64
Epoch = NewType("Epoch", int)  # uint64

Timestamp = NewType("Timestamp", int)  # unix seconds
Second = NewType("Second", int)

TimeProvider = Callable[[], float]


#
# Defaults to emulate "zero types"
#

default_slot = Slot(0)
default_epoch = Epoch(0)
default_timestamp = Timestamp(0)
default_second = Second(0)
