import pytest
from fastapi.testclient import TestClient
from api.deps import get_ward
from app import app
from core import Ward, WardConfig, Patient, Gender, BedState
from utils.bed_utils import roommate_of, unit_of


@pytest.fixture
def ward():
    return Ward()


@pytest.fixture
def single_room_ward():
    """One unit with a single room (101/102)."""
    return Ward(WardConfig(units=(1,), first_bed_index=1, last_bed_index=2))


@pytest.fixture
def small_ward():
    """Unit 1 with two rooms (101..104)."""
    return Ward(WardConfig(units=(1,), first_bed_index=1, last_bed_index=4))


@pytest.fixture
def make_patient():
    def _make(crn=10001, age=30, gender=Gender.MALE, infected=False, vip=False, name=None):
        return Patient(
            clinical_record_number=crn,
            name=name or f"Patient {crn}",
            age=age,
            gender=gender,
            is_infected=infected,
            is_vip=vip,
        )

    return _make


@pytest.fixture
def client(ward):
    app.dependency_overrides[get_ward] = lambda: ward
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def small_client(small_ward):
    app.dependency_overrides[get_ward] = lambda: small_ward
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def state_of(ward, bed_number):
    return ward.get_bed(bed_number).state


def assert_ward_invariants(ward):
    """Check the room rules every successful operation must preserve."""
    beds = {bed.number: bed for bed in ward.iter_beds()}
    seen = set()
    for number, bed in beds.items():
        mate = beds[roommate_of(number)]
        if bed.state is BedState.BLOCKED:
            assert bed.patient is None
            assert mate.state is BedState.OCCUPIED and mate.patient.is_isolated, number
        if bed.state is not BedState.OCCUPIED:
            continue
        p = bed.patient
        assert p.clinical_record_number not in seen
        seen.add(p.clinical_record_number)
        assert ward.find_patient(p.clinical_record_number) == (number, p)
        if ward.config.needs_pediatric_unit(p.age):
            assert unit_of(number) == ward.config.pediatric_unit
        if p.is_isolated:
            assert mate.state is BedState.BLOCKED, number
        if mate.state is BedState.OCCUPIED:
            rm = mate.patient
            assert p.gender == rm.gender
            assert ward.config.is_minor(p.age) == ward.config.is_minor(rm.age)
