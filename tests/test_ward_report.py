"""Tests for the text rendering of ward state and the demo entry point."""

from core import Bed, BedState, Gender, Patient
from main import main, run_demo
from utils.ward_report import format_bed, format_ward, format_summary, format_bed_list


class TestFormatting:
    def test_format_occupied_bed_with_tags(self):
        patient = Patient(10001, "Maria Garcia", 30, Gender.FEMALE, is_infected=True, is_vip=True)
        bed = Bed(101, BedState.OCCUPIED, patient)
        assert format_bed(bed) == "Bed 101: OCCUPIED - Maria Garcia (10001) [INFECTIOUS] [VIP]"

    def test_format_vacant_and_blocked(self):
        assert format_bed(Bed(102)) == "Bed 102: VACANT"
        assert format_bed(Bed(102, BedState.BLOCKED)) == "Bed 102: BLOCKED"

    def test_format_ward_lists_units_in_order(self, ward):
        lines = format_ward(ward)
        headers = [line for line in lines if line.startswith("--- Unit")]

        assert headers == ["--- Unit 1 ---", "--- Unit 2 ---", "--- Unit 4 ---", "--- Unit 5 ---"]
        assert len([line for line in lines if line.startswith("Bed ")]) == 152
        assert lines[2] == "Bed 101: VACANT"

    def test_format_summary(self, ward, make_patient):
        ward.admit(make_patient(vip=True), 101)
        assert format_summary(ward) == "Summary: 1 occupied, 150 vacant, 1 blocked"

    def test_format_bed_list_truncates(self):
        assert format_bed_list([101, 102]) == "101, 102"
        assert format_bed_list(list(range(101, 113))).endswith("110 ...")


class TestDemo:
    def test_demo_reports_each_outcome(self, ward, capsys):
        run_demo(ward)
        out = capsys.readouterr().out

        assert "Admit Maria to 201 -> Ok" in out
        assert "Admit John to 202 -> Err(Roommates must have the same gender)" in out
        assert "Admit Carlos to 101 -> Err(" in out
        assert "Admit Carlos to 501 -> Ok" in out
        assert "Admit test patient to 206 -> Err(Bed 206 is not available)" in out
        assert "Switch John and Peter -> Err(" in out
        assert "Summary:" in out

    def test_full_listing_only_with_env(self, monkeypatch, capsys):
        monkeypatch.delenv("SHOW_BEDS", raising=False)
        main()
        assert "FULL WARD STATE" not in capsys.readouterr().out

        monkeypatch.setenv("SHOW_BEDS", "1")
        main()
        out = capsys.readouterr().out
        assert "FULL WARD STATE" in out
        assert "--- Unit 5 ---" in out

    def test_empty_show_beds_still_lists(self, monkeypatch, capsys):
        monkeypatch.setenv("SHOW_BEDS", "")
        main()
        assert "FULL WARD STATE" in capsys.readouterr().out
