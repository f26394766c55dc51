from dataclasses import dataclass, field
from typing import List, Tuple
from utils.constants import (
    VALID_UNITS,
    FIRST_BED_INDEX,
    LAST_BED_INDEX,
    UNIT_MULTIPLIER,
    PEDIATRIC_UNIT,
    PEDIATRIC_AGE_LIMIT,
    MINOR_AGE_LIMIT,
)
from utils.bed_utils import compose_bed_number, unit_of, index_of
from exceptions.custom_errors import InvalidBedNumberError, InvalidWardConfigError


@dataclass(frozen=True)
class WardConfig:
    """
    A dataclass holding the layout and admission limits of a ward. Defaults come
    from config/constants.json; tests pass smaller layouts.
    """

    units: Tuple[int, ...] = field(default=VALID_UNITS)
    """The hospital units that have beds, in listing order."""
    first_bed_index: int = FIRST_BED_INDEX
    """The first bed index in each unit (odd, so that rooms are complete)."""
    last_bed_index: int = LAST_BED_INDEX
    """The last bed index in each unit, inclusive (even, so that rooms are complete)."""
    pediatric_unit: int = PEDIATRIC_UNIT
    """The only unit allowed to house patients under `pediatric_age_limit`."""
    pediatric_age_limit: int = PEDIATRIC_AGE_LIMIT
    """Patients younger than this must be placed in the pediatric unit."""
    minor_age_limit: int = MINOR_AGE_LIMIT
    """Patients younger than this may only share a room with each other."""

    def __post_init__(self):
        object.__setattr__(self, "units", tuple(self.units))
        errors = []

        if not self.units:
            errors.append(" • At least one unit is required.\n")
        if len(set(self.units)) != len(self.units):
            errors.append(f" • Units must be unique, got {list(self.units)}.\n")
        if any(u < 1 for u in self.units):
            errors.append(f" • Units must be positive, got {list(self.units)}.\n")
        if not 1 <= self.first_bed_index <= self.last_bed_index < UNIT_MULTIPLIER:
            errors.append(
                f" • Bed indices must satisfy 1 <= first <= last < {UNIT_MULTIPLIER}, "
                f"got {self.first_bed_index}..{self.last_bed_index}.\n"
            )
        if self.first_bed_index % 2 == 0 or self.last_bed_index % 2 == 1:
            errors.append(" • Bed index range must start odd and end even so every bed has a roommate.\n")
        if self.pediatric_age_limit < 0 or self.minor_age_limit < 0:
            errors.append(" • Age limits cannot be negative.\n")

        if errors:
            errors.insert(0, "Recheck the ward configuration:\n")
            raise InvalidWardConfigError("".join(errors))

    @classmethod
    def default(cls) -> "WardConfig":
        return cls()

    @property
    def beds_per_unit(self) -> int:
        return self.last_bed_index - self.first_bed_index + 1

    @property
    def total_beds(self) -> int:
        return len(self.units) * self.beds_per_unit

    def bed_numbers(self) -> List[int]:
        """All bed numbers of the ward, unit by unit in configured order."""
        return [
            compose_bed_number(unit, idx)
            for unit in self.units
            for idx in range(self.first_bed_index, self.last_bed_index + 1)
        ]

    def validate_bed_number(self, bed_number: int) -> int:
        """Return the bed number unchanged, or raise InvalidBedNumberError."""
        unit = unit_of(bed_number)
        if unit not in self.units:
            raise InvalidBedNumberError(f"Invalid unit: {unit} (bed {bed_number})")
        idx = index_of(bed_number)
        if not self.first_bed_index <= idx <= self.last_bed_index:
            raise InvalidBedNumberError(f"Invalid bed number: {idx} (bed {bed_number})")
        return bed_number

    def needs_pediatric_unit(self, age: int) -> bool:
        return age < self.pediatric_age_limit

    def is_minor(self, age: int) -> bool:
        return age < self.minor_age_limit
