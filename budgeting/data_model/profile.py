# data_model/profile.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from .items import NEED, WANT, FinancialItem


def _remove_item(items: List[FinancialItem], item: FinancialItem) -> None:
    for index, existing in enumerate(items):
        if existing is item:
            del items[index]
            return
    if item in items:
        items.remove(item)


def _item_rows(record: dict[str, Any], key: str) -> list:
    rows = record.get(key) or []
    if not isinstance(rows, list):
        raise TypeError(f"'{key}' must be a list, got {type(rows).__name__}")
    return rows


@dataclass
class Profile:
    """Income, savings and the Needs/Wants lists of one user.

    Allocations are percentages of ``income`` when ``allocation_by_percentage``
    is set, otherwise fixed currency amounts. They are independent settings and
    are never required to add up to 100 or to the income.
    """

    name: str
    income: float = 0.0
    savings_balance: float = 0.0
    needs_allocation: float = 0.0
    wants_allocation: float = 0.0
    savings_allocation: float = 0.0
    allocation_by_percentage: bool = True
    needs: List[FinancialItem] = field(default_factory=list)
    wants: List[FinancialItem] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.name} (Income: ${self.income:.2f})"

    def matches_name(self, name: str) -> bool:
        return self.name.casefold() == str(name).casefold()

    def add_need(self, item: FinancialItem) -> None:
        if item.category != NEED:
            raise ValueError(f"Cannot add a {item.category} to the needs list")
        self.needs.append(item)

    def remove_need(self, item: FinancialItem) -> None:
        _remove_item(self.needs, item)

    def add_want(self, item: FinancialItem) -> None:
        if item.category != WANT:
            raise ValueError(f"Cannot add a {item.category} to the wants list")
        self.wants.append(item)

    def remove_want(self, item: FinancialItem) -> None:
        _remove_item(self.wants, item)

    def items_for(self, category: str) -> List[FinancialItem]:
        if category == NEED:
            return self.needs
        if category == WANT:
            return self.wants
        raise ValueError(f"Unknown item category: {category!r}")

    def set_allocations(self, needs: float, wants: float, savings: float, by_percentage: bool) -> None:
        self.needs_allocation = needs
        self.wants_allocation = wants
        self.savings_allocation = savings
        self.allocation_by_percentage = by_percentage

    def tasks(self) -> List[FinancialItem]:
        return [*self.needs, *self.wants]

    def to_record(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "income": self.income,
            "savingsBalance": self.savings_balance,
            "needsAllocation": self.needs_allocation,
            "wantsAllocation": self.wants_allocation,
            "savingsAllocation": self.savings_allocation,
            "allocationByPercentage": self.allocation_by_percentage,
            "needs": [item.to_record() for item in self.needs],
            "wants": [item.to_record() for item in self.wants],
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Profile":
        if not isinstance(record, dict):
            raise TypeError(f"Profile record must be an object, got {type(record).__name__}")
        needs = [FinancialItem.from_record(row) for row in _item_rows(record, "needs")]
        wants = [FinancialItem.from_record(row) for row in _item_rows(record, "wants")]
        if any(item.category != NEED for item in needs) or any(item.category != WANT for item in wants):
            raise ValueError("Item category does not match its list")
        return cls(
            name=str(record["name"]),
            income=float(record.get("income", 0.0)),
            savings_balance=float(record.get("savingsBalance", 0.0)),
            needs_allocation=float(record.get("needsAllocation", 0.0)),
            wants_allocation=float(record.get("wantsAllocation", 0.0)),
            savings_allocation=float(record.get("savingsAllocation", 0.0)),
            allocation_by_percentage=bool(record.get("allocationByPercentage", True)),
            needs=needs,
            wants=wants,
        )
