list_beds_description = """
List every bed of the ward in bed number order.

- `unit` (query, optional): only beds of that unit.

Each entry has the bed `number`, its `unit`, the `roommate` bed, the `state` (`OCCUPIED`, `VACANT`, `BLOCKED`) and the `patient` for occupied beds.
"""

available_beds_description = """
Beds a patient could be admitted to right now, lowest number first.

Takes the same patient object as admission. A bed qualifies when it is vacant, respects the
unit 5 rule for patients under 13, is compatible with the roommate's current occupant and,
for infectious or VIP patients, has a vacant roommate bed.
"""
