from typing import List
from core.hard_rules import HardRule, define_hard_rules
from core.patient import Patient
from core.ward_config import WardConfig


class ConstraintManager:
    def __init__(self, config: WardConfig):
        self.config = config
        self.rules: list[HardRule] = []

    @classmethod
    def for_roommates(cls, config: WardConfig) -> "ConstraintManager":
        """Build a manager with every roommate rule registered."""
        manager = cls(config)
        for rule in define_hard_rules(config).values():
            manager.add_rule(rule)
        return manager

    def add_rule(self, rule: HardRule, condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append(rule)

    def violations(self, patient: Patient, roommate: Patient) -> List[HardRule]:
        return [rule for rule in self.rules if rule.violated(patient, roommate)]

    def is_compatible(self, patient: Patient, roommate: Patient) -> bool:
        return not self.violations(patient, roommate)

    def check(self, patient: Patient, roommate: Patient):
        """Raise the error of the first rule the pair violates."""
        for rule in self.rules:
            if rule.violated(patient, roommate):
                raise rule.error(rule.message)
