from dataclasses import dataclass
from typing import Callable, Type
from core.patient import Patient
from core.ward_config import WardConfig
from exceptions.custom_errors import (
    WardOperationError,
    GenderMismatchError,
    AgeBracketError,
    IsolationConflictError,
)


@dataclass
class HardRule:
    violated: Callable[[Patient, Patient], bool]
    """Called as `violated(incoming, roommate)`; True means the pair cannot share a room."""
    error: Type[WardOperationError]
    message: str


def define_hard_rules(config: WardConfig) -> dict[str, HardRule]:
    """Roommate rules, checked in insertion order."""
    return {
        "Same gender": HardRule(
            lambda p, rm: p.gender != rm.gender,
            GenderMismatchError,
            "Roommates must have the same gender",
        ),
        "Age bracket": HardRule(
            lambda p, rm: config.is_minor(p.age) != config.is_minor(rm.age),
            AgeBracketError,
            f"Patients under {config.minor_age_limit} can only share with other "
            f"under-{config.minor_age_limit} patients",
        ),
        "No isolated roommate": HardRule(
            lambda p, rm: rm.is_isolated,
            IsolationConflictError,
            "Cannot share a room with an infectious or VIP patient",
        ),
        # Add others as needed
    }
