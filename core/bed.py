from dataclasses import dataclass, field, replace
from enum import Enum
from typing import NamedTuple, Optional
from core.patient import Patient
from core.ward_config import WardConfig
from exceptions.custom_errors import InvalidBedStateError


class BedState(str, Enum):
    OCCUPIED = "OCCUPIED"
    VACANT = "VACANT"
    BLOCKED = "BLOCKED"


class BedCounts(NamedTuple):
    occupied: int
    vacant: int
    blocked: int


@dataclass
class Bed:
    """
    A single hospital bed. Only the Ward mutates beds; a patient is attached
    exactly when the state is OCCUPIED.

    The number is validated against `config` (the default layout unless the
    ward passes its own), so an invalid bed is never built.
    """

    number: int
    state: BedState = BedState.VACANT
    patient: Optional[Patient] = None
    config: WardConfig = field(default_factory=WardConfig.default, repr=False, compare=False)

    def __post_init__(self):
        self.config.validate_bed_number(self.number)
        self.state = BedState(self.state)
        if (self.state is BedState.OCCUPIED) != (self.patient is not None):
            raise InvalidBedStateError(
                f"Bed {self.number}: a patient must be attached exactly when the bed is OCCUPIED "
                f"(state {self.state.value}, patient {'set' if self.patient else 'missing'})"
            )

    @classmethod
    def vacant(cls, number: int, config: WardConfig) -> "Bed":
        """Create a VACANT bed, validating the UXX number against the ward layout."""
        return cls(number=number, config=config)

    def is_available(self) -> bool:
        return self.state is BedState.VACANT

    def is_blocked(self) -> bool:
        return self.state is BedState.BLOCKED

    def is_occupied(self) -> bool:
        return self.state is BedState.OCCUPIED

    def occupy(self, patient: Patient):
        self.state = BedState.OCCUPIED
        self.patient = patient

    def vacate(self) -> Optional[Patient]:
        patient, self.patient = self.patient, None
        self.state = BedState.VACANT
        return patient

    def block(self):
        self.patient = None
        self.state = BedState.BLOCKED

    def copy(self) -> "Bed":
        return replace(self)
