from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Literal, Optional

NEED = "need"
WANT = "want"
ITEM_CATEGORIES = [NEED, WANT]

ItemCategory = Literal["need", "want"]


@dataclass
class FinancialItem:
    """A Need (obligation) or Want (goal) owned by a profile."""

    description: str
    cost: float
    due_date: date
    category: ItemCategory = NEED
    is_complete: bool = field(default=False, init=False)

    @classmethod
    def need(cls, description: str, cost: float, due_date: date) -> "FinancialItem":
        return cls(description, cost, due_date, category=NEED)

    @classmethod
    def want(cls, description: str, cost: float, due_date: date) -> "FinancialItem":
        return cls(description, cost, due_date, category=WANT)

    @property
    def date_label(self) -> str:
        return "Target" if self.category == WANT else "Due"

    def mark_complete(self) -> None:
        self.is_complete = True

    def update(
        self,
        description: Optional[str] = None,
        cost: Optional[float] = None,
        due_date: Optional[date] = None,
    ) -> None:
        if description is not None:
            self.description = description
        if cost is not None:
            self.cost = cost
        if due_date is not None:
            self.due_date = due_date

    def to_record(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "cost": self.cost,
            "dueDate": self.due_date.isoformat(),
            "category": self.category,
            "isComplete": self.is_complete,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "FinancialItem":
        if not isinstance(record, dict):
            raise TypeError(f"Item record must be an object, got {type(record).__name__}")
        category = str(record.get("category", NEED)).lower()
        if category not in ITEM_CATEGORIES:
            raise ValueError(f"Unknown item category: {category!r}")
        item = cls(
            description=str(record["description"]),
            cost=float(record["cost"]),
            due_date=date.fromisoformat(str(record["dueDate"])),
            category=category,
        )
        if record.get("isComplete"):
            item.mark_complete()
        return item
