from pydantic import BaseModel
from typing import List, Optional
from core.bed import Bed, BedState
from schemas.patients.patient import PatientRecord
from utils.bed_utils import unit_of, roommate_of


class BedView(BaseModel):
    number: int
    unit: int
    roommate: int
    state: BedState
    patient: Optional[PatientRecord] = None

    @classmethod
    def from_bed(cls, bed: Bed) -> "BedView":
        return cls(
            number=bed.number,
            unit=unit_of(bed.number),
            roommate=roommate_of(bed.number),
            state=bed.state,
            patient=PatientRecord.from_patient(bed.patient) if bed.patient else None,
        )


class BedSummary(BaseModel):
    occupied: int
    vacant: int
    blocked: int
    total: int


class AvailableBeds(BaseModel):
    count: int
    bedNumbers: List[int]  # ascending; relocation picks the first
