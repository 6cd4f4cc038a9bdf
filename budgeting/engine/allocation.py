"""Split a profile's income across Needs, Wants and Savings."""

from __future__ import annotations

from ..data_model import Profile


def _category_amount(profile: Profile, allocation: float) -> float:
    if profile.allocation_by_percentage:
        return profile.income * (allocation / 100.0)
    return allocation


def calculate_needs_amount(profile: Profile) -> float:
    return _category_amount(profile, profile.needs_allocation)


def calculate_wants_amount(profile: Profile) -> float:
    return _category_amount(profile, profile.wants_allocation)


def calculate_projected_savings(profile: Profile) -> float:
    """Savings amount for one cycle. Preview only, the balance is untouched."""
    return _category_amount(profile, profile.savings_allocation)


def apply_savings_to_profile(profile: Profile) -> float:
    """Add this cycle's projected savings to the balance and return the amount added."""
    savings = calculate_projected_savings(profile)
    profile.savings_balance = profile.savings_balance + savings
    return savings


def allocation_summary(profile: Profile) -> dict:
    return {
        "mode": "percentage" if profile.allocation_by_percentage else "fixed",
        "income": profile.income,
        "needs": calculate_needs_amount(profile),
        "wants": calculate_wants_amount(profile),
        "projectedSavings": calculate_projected_savings(profile),
        "savingsBalance": profile.savings_balance,
    }
