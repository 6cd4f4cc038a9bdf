from __future__ import annotations

from dataclasses import dataclass

UNREACHABLE = -1


@dataclass
class Projection:
    description: str
    monthly_contribution: float
    months_needed: int

    @property
    def is_unreachable(self) -> bool:
        return self.months_needed == UNREACHABLE

    @property
    def is_already_met(self) -> bool:
        return self.months_needed == 0

    @property
    def status(self) -> str:
        if self.is_unreachable:
            return "unreachable"
        if self.is_already_met:
            return "already met"
        return "in progress"
