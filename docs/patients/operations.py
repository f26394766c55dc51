admit_patient_description = """
Admit a new patient to a vacant bed.

### Request Body

- `bedNumber` (int): Bed in `UXX` format, where `U` is the unit (1, 2, 4 or 5) and `XX` the bed index (01..38).

- `patient` (Object):
    ```json
    {
        "clinicalRecordNumber": 10001,
        "name": "Maria Garcia",
        "age": 30,
        "gender": "Female",
        "isInfected": false,
        "isVip": false
    }
    ```

### Rules

Checked in order, the first failure is returned:

1. The bed must exist (`404`) and be vacant (`409`).
2. The clinical record number must not already be admitted (`409`).
3. Patients under 13 can only be admitted to unit 5 (`422`).
4. If the roommate bed is occupied: same gender, same under-16 bracket, and the roommate cannot be infectious or VIP (`422`).
5. Infectious or VIP patients need the roommate bed vacant, because it will be blocked (`409`).
"""

move_patient_description = """
Move an admitted patient to another bed.

The destination goes through every admission rule. When the destination is rejected,
the patient stays in the original bed and any bed blocked for them stays blocked.
"""

switch_patients_description = """
Swap the beds of two admitted patients.

Both rooms are checked before anything changes:

- Patients under 13 cannot end up outside unit 5.
- Each patient must be compatible with the new roommate (gender, under-16 bracket, no infectious/VIP roommate).
- Infectious or VIP patients can only switch with other infectious or VIP patients.

Either both patients move or neither does.
"""

set_vip_description = """
Mark or unmark a patient as VIP.

- Marking: an occupied roommate bed is emptied first by moving its occupant to the lowest-numbered compatible bed, then the roommate bed is blocked. If no compatible bed exists, nothing changes (`409`).
- Unmarking: the roommate bed is unblocked unless the patient is also infectious.
"""

mark_infected_description = """
Mark a patient as infectious. An occupied roommate bed is emptied first (lowest-numbered compatible bed), then blocked. If no compatible bed exists, nothing changes (`409`).
"""

unmark_infected_description = """
Clear the infectious flag. The roommate bed is unblocked unless the patient is VIP.
"""

discharge_patient_description = """
Discharge a patient. The bed becomes vacant and, for infectious or VIP patients, the blocked roommate bed is released.
"""
