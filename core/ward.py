import threading
from functools import wraps
from typing import Dict, Iterable, List, Optional, Tuple
from core.bed import Bed, BedCounts, BedState
from core.constraint_manager import ConstraintManager
from core.patient import Patient
from core.ward_config import WardConfig
from exceptions.custom_errors import (
    WardOperationError,
    BedNotFoundError,
    BedNotAvailableError,
    PediatricUnitError,
    AdjacentBedNotFreeError,
    IsolationConflictError,
    PatientNotFoundError,
    DuplicatePatientError,
    NoRelocationBedError,
)
from utils.bed_utils import roommate_of, unit_of
from utils.logger import logger

"""
The ward engine. Every public operation validates first and commits last; an
operation that raises a WardOperationError leaves the beds as they were.
"""


def ward_operation(method):
    """Run a public Ward operation under the ward lock and log rejections."""

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            try:
                return method(self, *args, **kwargs)
            except WardOperationError as e:
                logger.warning("%s%r rejected: %s", method.__name__, args, e)
                raise

    return wrapper


class Ward:
    """
    Owns the bed map and is the only place bed states change.

    Beds are indexed by their UXX number. A second index maps clinical record
    numbers to the bed holding that patient and is updated by `_place` and
    `_vacate`, the only two helpers that change occupancy.
    """

    def __init__(self, config: Optional[WardConfig] = None):
        self.config = config or WardConfig.default()
        self._lock = threading.RLock()
        self._rules = ConstraintManager.for_roommates(self.config)
        self._beds: Dict[int, Bed] = {
            number: Bed.vacant(number, self.config) for number in self.config.bed_numbers()
        }
        self._index: Dict[int, int] = {}
        logger.info(
            "Ward initialised with %d beds in units %s",
            self.config.total_beds,
            list(self.config.units),
        )

    def __len__(self) -> int:
        return len(self._beds)

    def __contains__(self, bed_number: int) -> bool:
        return bed_number in self._beds

    # ----------------- Operations -----------------

    @ward_operation
    def admit(self, patient: Patient, bed_number: int):
        """Admit a new patient to a vacant bed, blocking the roommate bed for VIP/infectious patients."""
        self._admit(patient, bed_number)

    @ward_operation
    def move(self, clinical_record: int, new_bed_number: int):
        """Move a patient to another bed. If the destination rejects them, nothing changes."""
        self._move(clinical_record, new_bed_number)

    @ward_operation
    def switch(self, clinical_record_a: int, clinical_record_b: int):
        """
        Swap the beds of two patients. Both rooms are validated before either bed
        changes. Switches never block or unblock beds, so an isolated patient can
        only trade places with another isolated patient.
        """
        bed_a, patient_a = self._locate(clinical_record_a, "First patient")
        bed_b, patient_b = self._locate(clinical_record_b, "Second patient")
        if bed_a == bed_b:
            return

        self._check_unit(patient_a, bed_b)
        self._check_unit(patient_b, bed_a)

        if patient_a.is_isolated != patient_b.is_isolated:
            raise IsolationConflictError(
                "Switch would leave an isolation block inconsistent: "
                "infectious or VIP patients can only switch with each other"
            )

        for incoming, dest, partner_bed in ((patient_a, bed_b, bed_a), (patient_b, bed_a, bed_b)):
            roommate_number = roommate_of(dest)
            # the partner's bed is the swap itself
            if roommate_number == partner_bed:
                continue
            roommate_bed = self._beds[roommate_number]
            if roommate_bed.is_occupied():
                self._rules.check(incoming, roommate_bed.patient)

        self._vacate(bed_a)
        self._vacate(bed_b)
        self._place(bed_a, patient_b)
        self._place(bed_b, patient_a)
        logger.info(
            "Switched patient %s (now bed %s) and patient %s (now bed %s)",
            clinical_record_a,
            bed_b,
            clinical_record_b,
            bed_a,
        )

    @ward_operation
    def set_vip(self, clinical_record: int, is_vip: bool = True):
        """
        Mark or unmark a patient as VIP. Marking relocates an occupied roommate
        first and fails without changes when no compatible bed is free.
        """
        bed_number, patient = self._locate(clinical_record)
        if patient.is_vip == is_vip:
            return

        updated = patient.with_flags(is_vip=is_vip)
        if is_vip:
            self._isolate(bed_number, updated, "No available bed to relocate roommate")
        else:
            self._release(bed_number, updated)
        logger.info("Patient %s VIP set to %s", clinical_record, is_vip)

    @ward_operation
    def mark_infected(self, clinical_record: int):
        """Mark a patient as infectious, moving an occupied roommate out first."""
        bed_number, patient = self._locate(clinical_record)
        if patient.is_infected:
            return

        self._isolate(
            bed_number,
            patient.with_flags(is_infected=True),
            "No available bed to move roommate",
        )
        logger.info("Patient %s marked as infectious", clinical_record)

    @ward_operation
    def unmark_infected(self, clinical_record: int):
        """Clear the infectious flag; the roommate bed is unblocked unless the patient is VIP."""
        bed_number, patient = self._locate(clinical_record)
        if not patient.is_infected:
            return

        self._release(bed_number, patient.with_flags(is_infected=False))
        logger.info("Patient %s no longer infectious", clinical_record)

    @ward_operation
    def discharge(self, clinical_record: int) -> Patient:
        """Free the patient's bed; a VIP/infectious patient's blocked roommate bed is released."""
        bed_number, patient = self._locate(clinical_record)
        self._vacate(bed_number)
        if patient.is_isolated:
            self._unblock(roommate_of(bed_number))
        logger.info("Discharged patient %s from bed %s", clinical_record, bed_number)
        return patient

    # ----------------- Queries -----------------

    @ward_operation
    def find_patient(self, clinical_record: int) -> Optional[Tuple[int, Patient]]:
        """Find a patient by clinical record number and return (bed number, patient)."""
        bed_number = self._index.get(clinical_record)
        if bed_number is None:
            return None
        return bed_number, self._beds[bed_number].patient

    @ward_operation
    def count_beds_by_state(self) -> BedCounts:
        counts = {state: 0 for state in BedState}
        for bed in self._beds.values():
            counts[bed.state] += 1
        return BedCounts(
            occupied=counts[BedState.OCCUPIED],
            vacant=counts[BedState.VACANT],
            blocked=counts[BedState.BLOCKED],
        )

    @ward_operation
    def available_beds_for(self, patient: Patient) -> List[int]:
        """All beds the patient could be admitted to right now, lowest number first."""
        return self._available_beds_for(patient)

    @ward_operation
    def get_bed(self, bed_number: int) -> Bed:
        """Snapshot of a single bed."""
        bed = self._beds.get(bed_number)
        if bed is None:
            raise BedNotFoundError(f"Bed {bed_number} does not exist")
        return bed.copy()

    @ward_operation
    def iter_beds(self, unit: Optional[int] = None) -> List[Bed]:
        """Snapshots of every bed (or every bed of one unit), in bed number order."""
        return [
            bed.copy()
            for number, bed in sorted(self._beds.items())
            if unit is None or unit_of(number) == unit
        ]

    # ----------------- Internals -----------------

    def _admit(self, patient: Patient, bed_number: int):
        self._check_admission(patient, bed_number)
        self._place(bed_number, patient)
        if patient.is_isolated:
            roommate_bed = self._beds[roommate_of(bed_number)]
            if roommate_bed.is_available():
                roommate_bed.block()
        logger.info("Admitted patient %s to bed %s", patient.crn, bed_number)

    def _check_admission(self, patient: Patient, bed_number: int):
        bed = self._beds.get(bed_number)
        if bed is None:
            raise BedNotFoundError(f"Bed {bed_number} does not exist")
        if not bed.is_available():
            raise BedNotAvailableError(f"Bed {bed_number} is not available")
        if patient.crn in self._index:
            raise DuplicatePatientError(
                f"Patient {patient.crn} is already admitted to bed {self._index[patient.crn]}"
            )
        self._check_unit(patient, bed_number)

        roommate_bed = self._beds[roommate_of(bed_number)]
        if roommate_bed.is_occupied():
            self._rules.check(patient, roommate_bed.patient)
        # the roommate bed has to be blocked, so it must be free now
        if patient.is_isolated and not roommate_bed.is_available():
            raise AdjacentBedNotFreeError(
                "Patient requires the adjacent bed to be blocked, but it is not free"
            )

    def _check_unit(self, patient: Patient, bed_number: int):
        if self.config.needs_pediatric_unit(patient.age) and unit_of(bed_number) != self.config.pediatric_unit:
            raise PediatricUnitError(
                f"Patients under {self.config.pediatric_age_limit} must be in unit {self.config.pediatric_unit}"
            )

    def _is_candidate(self, patient: Patient, bed_number: int, bed: Bed) -> bool:
        if not bed.is_available():
            return False
        if self.config.needs_pediatric_unit(patient.age) and unit_of(bed_number) != self.config.pediatric_unit:
            return False
        roommate_bed = self._beds[roommate_of(bed_number)]
        if roommate_bed.is_occupied() and not self._rules.is_compatible(patient, roommate_bed.patient):
            return False
        if patient.is_isolated and not roommate_bed.is_available():
            return False
        return True

    def _available_beds_for(self, patient: Patient) -> List[int]:
        return sorted(
            number for number, bed in self._beds.items() if self._is_candidate(patient, number, bed)
        )

    def _move(self, clinical_record: int, new_bed_number: int):
        current, patient = self._locate(clinical_record)
        old_roommate = roommate_of(current)
        snapshot = self._snapshot((current, old_roommate))

        self._vacate(current)
        if patient.is_isolated:
            self._unblock(old_roommate)

        try:
            self._admit(patient, new_bed_number)
        except WardOperationError:
            self._restore(snapshot)
            raise
        logger.info("Moved patient %s from bed %s to bed %s", clinical_record, current, new_bed_number)

    def _isolate(self, bed_number: int, updated: Patient, no_bed_message: str):
        """Relocate an occupied roommate, then store the flagged patient and block the roommate bed."""
        roommate_number = roommate_of(bed_number)
        roommate_bed = self._beds[roommate_number]
        if roommate_bed.is_occupied():
            occupant = roommate_bed.patient
            candidates = self._available_beds_for(occupant)
            if not candidates:
                raise NoRelocationBedError(no_bed_message)
            self._move(occupant.crn, candidates[0])
            logger.info("Relocated roommate %s from bed %s to bed %s", occupant.crn, roommate_number, candidates[0])

        self._beds[bed_number].occupy(updated)
        if roommate_bed.is_available():
            roommate_bed.block()

    def _release(self, bed_number: int, updated: Patient):
        self._beds[bed_number].occupy(updated)
        if not updated.is_isolated:
            self._unblock(roommate_of(bed_number))

    def _locate(self, clinical_record: int, label: str = "Patient") -> Tuple[int, Patient]:
        bed_number = self._index.get(clinical_record)
        if bed_number is None:
            raise PatientNotFoundError(f"{label} not found: {clinical_record}")
        return bed_number, self._beds[bed_number].patient

    def _place(self, bed_number: int, patient: Patient):
        self._beds[bed_number].occupy(patient)
        self._index[patient.crn] = bed_number

    def _vacate(self, bed_number: int) -> Optional[Patient]:
        patient = self._beds[bed_number].vacate()
        if patient is not None:
            self._index.pop(patient.crn, None)
        return patient

    def _unblock(self, bed_number: int):
        bed = self._beds[bed_number]
        if bed.is_blocked():
            bed.vacate()

    def _snapshot(self, bed_numbers: Iterable[int]) -> Dict[int, Bed]:
        return {number: self._beds[number].copy() for number in bed_numbers}

    def _restore(self, snapshot: Dict[int, Bed]):
        for number, saved in snapshot.items():
            self._vacate(number)
            self._beds[number] = saved.copy()
            if saved.is_occupied():
                self._index[saved.patient.crn] = number
