import pytest

from budgeting.data_model import Profile
from budgeting.engine.allocation import (
    allocation_summary,
    apply_savings_to_profile,
    calculate_needs_amount,
    calculate_projected_savings,
    calculate_wants_amount,
)


def _profile(income=4000.0, balance=250.0, needs=50.0, wants=30.0, savings=20.0, by_percentage=True):
    profile = Profile(name="Alex", income=income, savings_balance=balance)
    profile.set_allocations(needs, wants, savings, by_percentage)
    return profile


def test_new_profile_defaults_to_zero_percent_allocations():
    profile = Profile(name="Fresh", income=3000.0, savings_balance=0.0)

    assert profile.allocation_by_percentage is True
    assert calculate_needs_amount(profile) == 0.0
    assert calculate_wants_amount(profile) == 0.0
    assert calculate_projected_savings(profile) == 0.0


@pytest.mark.parametrize(
    "income, needs, wants, savings",
    [
        (4000.0, 50.0, 30.0, 20.0),
        (2750.0, 62.5, 12.5, 10.0),
        (0.0, 50.0, 30.0, 20.0),
        (1000.0, 80.0, 40.0, 30.0),
    ],
)
def test_percentage_mode_scales_income(income, needs, wants, savings):
    profile = _profile(income=income, needs=needs, wants=wants, savings=savings)

    assert calculate_needs_amount(profile) == pytest.approx(income * needs / 100)
    assert calculate_wants_amount(profile) == pytest.approx(income * wants / 100)
    assert calculate_projected_savings(profile) == pytest.approx(income * savings / 100)


def test_fixed_mode_ignores_income():
    profile = _profile(income=9999.0, needs=1200.0, wants=300.0, savings=450.0, by_percentage=False)

    assert calculate_needs_amount(profile) == 1200.0
    assert calculate_wants_amount(profile) == 300.0
    assert calculate_projected_savings(profile) == 450.0


def test_negative_and_oversized_allocations_are_computed_literally():
    profile = _profile(income=-2000.0, needs=150.0, wants=-10.0, savings=0.0)

    assert calculate_needs_amount(profile) == pytest.approx(-3000.0)
    assert calculate_wants_amount(profile) == pytest.approx(200.0)


def test_amounts_follow_income_changes_without_refresh():
    profile = _profile(income=1000.0, needs=50.0)
    assert calculate_needs_amount(profile) == pytest.approx(500.0)

    profile.income = 3000.0

    assert calculate_needs_amount(profile) == pytest.approx(1500.0)


def test_repeated_calculation_is_stable():
    profile = _profile()

    assert calculate_needs_amount(profile) == calculate_needs_amount(profile)


def test_projected_savings_is_a_preview():
    profile = _profile(balance=250.0)

    calculate_projected_savings(profile)
    calculate_projected_savings(profile)

    assert profile.savings_balance == 250.0


def test_apply_savings_adds_previewed_amount():
    profile = _profile(income=4000.0, balance=250.0, savings=20.0)
    preview = calculate_projected_savings(profile)

    applied = apply_savings_to_profile(profile)

    assert applied == preview
    assert profile.savings_balance == pytest.approx(250.0 + preview)


def test_apply_savings_twice_accumulates():
    profile = _profile(balance=0.0, savings=100.0, by_percentage=False)

    apply_savings_to_profile(profile)
    apply_savings_to_profile(profile)

    assert profile.savings_balance == 200.0


def test_allocation_summary_reports_mode_and_amounts():
    profile = _profile(income=4000.0, balance=10.0, needs=50.0, wants=30.0, savings=20.0)

    summary = allocation_summary(profile)

    assert summary["mode"] == "percentage"
    assert summary["needs"] == pytest.approx(2000.0)
    assert summary["wants"] == pytest.approx(1200.0)
    assert summary["projectedSavings"] == pytest.approx(800.0)
    assert summary["savingsBalance"] == 10.0
