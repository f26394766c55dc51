"""Tests for bed numbering, room pairing and ward layout configuration."""

import pytest

from core import Bed, BedState, WardConfig
from exceptions.custom_errors import InvalidBedNumberError, InvalidBedStateError, InvalidWardConfigError
from utils.bed_utils import compose_bed_number, unit_of, index_of, roommate_of
from utils.constants import TOTAL_BEDS, VALID_UNITS


class TestBedNumbers:
    def test_compose_and_decode(self):
        assert compose_bed_number(2, 5) == 205
        assert unit_of(438) == 4
        assert index_of(438) == 38

    def test_roommate_pairs_by_parity(self):
        assert roommate_of(101) == 102
        assert roommate_of(102) == 101
        assert roommate_of(537) == 538
        assert roommate_of(438) == 437

    def test_roommate_is_an_involution_within_unit(self):
        for number in WardConfig.default().bed_numbers():
            assert roommate_of(roommate_of(number)) == number
            assert unit_of(roommate_of(number)) == unit_of(number)


class TestWardConfig:
    def test_default_layout(self):
        config = WardConfig.default()
        assert config.units == (1, 2, 4, 5)
        assert config.units == VALID_UNITS
        assert config.total_beds == TOTAL_BEDS == 152
        assert len(config.bed_numbers()) == 152

    @pytest.mark.parametrize("number", [101, 138, 201, 238, 401, 505, 538])
    def test_valid_bed_numbers(self, number):
        assert WardConfig.default().validate_bed_number(number) == number

    @pytest.mark.parametrize(
        "number, message",
        [(301, "Invalid unit"), (601, "Invalid unit"), (100, "Invalid bed number"), (139, "Invalid bed number")],
    )
    def test_invalid_bed_numbers(self, number, message):
        config = WardConfig.default()
        with pytest.raises(InvalidBedNumberError, match=message):
            config.validate_bed_number(number)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"units": ()},
            {"units": (1, 1)},
            {"units": (0,)},
            {"first_bed_index": 2},
            {"last_bed_index": 37},
            {"last_bed_index": 100},
            {"first_bed_index": 5, "last_bed_index": 4},
            {"minor_age_limit": -1},
        ],
    )
    def test_malformed_config_rejected(self, kwargs):
        with pytest.raises(InvalidWardConfigError):
            WardConfig(**kwargs)

    def test_units_list_is_normalised_to_tuple(self):
        assert WardConfig(units=[1, 5]).units == (1, 5)


class TestBed:
    def test_vacant_bed(self):
        bed = Bed.vacant(101, WardConfig.default())
        assert bed.state is BedState.VACANT
        assert bed.is_available()
        assert bed.patient is None

    def test_invalid_bed_never_built(self):
        with pytest.raises(InvalidBedNumberError):
            Bed.vacant(301, WardConfig.default())

    def test_state_transitions(self, make_patient):
        bed = Bed.vacant(101, WardConfig.default())
        patient = make_patient()

        bed.occupy(patient)
        assert bed.is_occupied() and bed.patient == patient

        assert bed.vacate() == patient
        assert bed.is_available() and bed.patient is None

        bed.block()
        assert bed.is_blocked() and bed.patient is None

    def test_copy_is_detached(self, make_patient):
        bed = Bed.vacant(101, WardConfig.default())
        snapshot = bed.copy()
        bed.occupy(make_patient())
        assert snapshot.is_available()

    @pytest.mark.parametrize(
        "number, state",
        [(301, BedState.VACANT), (139, BedState.BLOCKED), (100, BedState.VACANT)],
    )
    def test_direct_construction_validates_number(self, number, state):
        with pytest.raises(InvalidBedNumberError):
            Bed(number, state)

    def test_occupied_bed_needs_a_patient(self):
        with pytest.raises(InvalidBedStateError):
            Bed(101, BedState.OCCUPIED)

    @pytest.mark.parametrize("state", [BedState.VACANT, BedState.BLOCKED])
    def test_patient_only_on_occupied_bed(self, state, make_patient):
        with pytest.raises(InvalidBedStateError):
            Bed(101, state, make_patient())

    def test_direct_construction_accepts_valid_beds(self, make_patient):
        patient = make_patient()
        assert Bed(101, BedState.OCCUPIED, patient).patient == patient
        assert Bed(102, "BLOCKED").state is BedState.BLOCKED

    def test_number_checked_against_own_layout(self):
        bed = Bed(301, config=WardConfig(units=(3,)))
        assert bed.is_available()
