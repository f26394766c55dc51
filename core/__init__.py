"""
core
----

Bed assignment engine components:

- Patient & Gender:
  Immutable patient record, identified by its clinical record number.

- Bed, BedState & BedCounts:
  A single bed slot (VACANT, OCCUPIED or BLOCKED) and the census tuple.

- WardConfig:
  Units, bed index range and age limits used to build a ward.

- HardRule, define_hard_rules & ConstraintManager:
  Roommate compatibility rules and the manager that applies them in order.

- Ward:
  Owns every bed and enforces admission, relocation and isolation policy.
"""
from .patient import Patient, Gender
from .bed import Bed, BedState, BedCounts
from .ward_config import WardConfig
from .hard_rules import HardRule, define_hard_rules
from .constraint_manager import ConstraintManager
from .ward import Ward
