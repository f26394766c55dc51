from dataclasses import dataclass, replace
from enum import Enum
from utils.constants import MIN_CLINICAL_RECORD, MAX_CLINICAL_RECORD
from exceptions.custom_errors import InvalidClinicalRecordError, InvalidPatientError


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


@dataclass(frozen=True)
class Patient:
    """
    A hospital patient. The clinical record number identifies the patient; flag
    changes produce a new Patient through `with_flags`.
    """

    clinical_record_number: int
    """Clinical Record Number (5 digits)."""
    name: str
    age: int
    gender: Gender
    is_infected: bool = False
    """Whether the patient has an infectious disease."""
    is_vip: bool = False

    def __post_init__(self):
        if not MIN_CLINICAL_RECORD <= self.clinical_record_number <= MAX_CLINICAL_RECORD:
            raise InvalidClinicalRecordError(
                f"The clinical record number must have 5 digits, got {self.clinical_record_number}"
            )
        if isinstance(self.age, bool) or not isinstance(self.age, int) or self.age < 0:
            raise InvalidPatientError(f"Age must be a non-negative integer, got {self.age!r}")
        # accept "Male" / "Female" as well as Gender members
        object.__setattr__(self, "gender", Gender(self.gender))

    @property
    def crn(self) -> int:
        return self.clinical_record_number

    @property
    def is_isolated(self) -> bool:
        """VIP and infectious patients keep their roommate bed blocked."""
        return self.is_vip or self.is_infected

    def with_flags(self, **flags) -> "Patient":
        return replace(self, **flags)
