import math

import pandas as pd

from ..data_model import UNREACHABLE, FinancialItem, Profile, Projection

PROJECTION_COLUMNS = ["Description", "Cost", "Target Date", "Complete", "Months Needed", "Status"]


def estimate_goal_completion_months(want: FinancialItem, profile: Profile, monthly_contribution: float) -> int:
    """Whole months of ``monthly_contribution`` needed before savings cover ``want.cost``.

    Returns 0 when the goal costs nothing or is already covered by the savings
    balance. Returns -1 when the contribution is zero or negative, or when NaN
    or infinite inputs leave no finite month count.
    """
    if want.cost <= 0:
        return 0
    remaining = want.cost - profile.savings_balance
    if remaining <= 0:
        return 0
    if monthly_contribution <= 0:
        return UNREACHABLE
    months = remaining / monthly_contribution
    if not math.isfinite(months):
        return UNREACHABLE
    return int(math.ceil(months))


def project_goal(want: FinancialItem, profile: Profile, monthly_contribution: float) -> Projection:
    months = estimate_goal_completion_months(want, profile, monthly_contribution)
    return Projection(
        description=want.description,
        monthly_contribution=monthly_contribution,
        months_needed=months,
    )


def projection_table(profile: Profile, monthly_contribution: float) -> pd.DataFrame:
    rows = []
    for want in profile.wants:
        projection = project_goal(want, profile, monthly_contribution)
        rows.append(
            {
                "Description": want.description,
                "Cost": want.cost,
                "Target Date": want.due_date.isoformat(),
                "Complete": want.is_complete,
                "Months Needed": projection.months_needed,
                "Status": projection.status,
            }
        )
    return pd.DataFrame(rows, columns=PROJECTION_COLUMNS)
