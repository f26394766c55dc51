import os
from dotenv import load_dotenv
from core import Ward, Patient, Gender
from exceptions.custom_errors import WardOperationError
from utils.constants import TOTAL_BEDS
from utils.ward_report import format_ward, format_summary, format_bed_list


def report(label: str, operation, *args):
    """Run a ward operation and print its outcome as Ok / Err(<message>)."""
    try:
        operation(*args)
    except WardOperationError as e:
        print(f"{label} -> Err({e})")
        return False
    print(f"{label} -> Ok")
    return True


def run_demo(ward: Ward):
    maria = Patient(10001, "Maria Garcia", 30, Gender.FEMALE)
    john = Patient(10002, "John Lopez", 35, Gender.MALE)
    carlos = Patient(10003, "Carlos (10 years)", 10, Gender.MALE)
    ana = Patient(10004, "Ana Martinez", 34, Gender.FEMALE)
    peter = Patient(10005, "Peter Sanchez", 35, Gender.MALE)
    tester = Patient(19000, "Test Patient", 40, Gender.MALE)

    # === Admissions ===
    report("Admit Maria to 201", ward.admit, maria, 201)
    # different gender cannot share room
    report("Admit John to 202", ward.admit, john, 202)
    report("Admit John to 205", ward.admit, john, 205)
    # children under 13 only in unit 5
    report("Admit Carlos to 101", ward.admit, carlos, 101)
    report("Admit Carlos to 501", ward.admit, carlos, 501)
    report("Admit Ana to 203", ward.admit, ana, 203)

    # === VIP ===
    report("Mark John as VIP", ward.set_vip, 10002, True)
    # 206 is now blocked
    report("Admit test patient to 206", ward.admit, tester, 206)

    candidates = ward.available_beds_for(tester)
    print(f"Available beds for adult male ({len(candidates)}): {format_bed_list(candidates)}")

    # === Infection ===
    report("Mark Maria as infectious", ward.mark_infected, 10001)
    report("Unmark Maria as infectious", ward.unmark_infected, 10001)

    # === Move & switch ===
    report("Move John to bed 207", ward.move, 10002, 207)
    report("Admit Peter to 209", ward.admit, peter, 209)
    # rejected: VIP John may only switch with another VIP or infectious patient,
    # because a switch never moves the block on his roommate bed
    report("Switch John and Peter", ward.switch, 10002, 10005)

    found = ward.find_patient(10002)
    if found:
        bed_number, patient = found
        print(f"Find patient 10002 => bed {bed_number}, name: {patient.name}")
    else:
        print("Patient 10002 not found")

    report("Discharge John", ward.discharge, 10002)
    print(format_summary(ward))


def main():
    load_dotenv()
    ward = Ward()
    print(f"Total beds: {TOTAL_BEDS}")
    run_demo(ward)

    # Full listing whenever SHOW_BEDS is defined, even as an empty value
    if "SHOW_BEDS" in os.environ:
        print("\n=== FULL WARD STATE ===")
        print("\n".join(format_ward(ward)))


if __name__ == "__main__":
    main()
