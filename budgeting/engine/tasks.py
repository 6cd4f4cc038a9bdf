import pandas as pd

from ..data_model import Profile

TASK_COLUMNS = ["Category", "Index", "Description", "Cost", "Date Label", "Due Date", "Complete"]


def task_frame(profile: Profile) -> pd.DataFrame:
    """Needs followed by Wants, each keeping its position in the owning list."""
    rows = []
    for category_items in (profile.needs, profile.wants):
        for index, item in enumerate(category_items):
            rows.append(
                {
                    "Category": item.category,
                    "Index": index,
                    "Description": item.description,
                    "Cost": item.cost,
                    "Date Label": item.date_label,
                    "Due Date": item.due_date.isoformat(),
                    "Complete": item.is_complete,
                }
            )
    return pd.DataFrame(rows, columns=TASK_COLUMNS)


def open_cost_by_category(profile: Profile) -> dict[str, float]:
    df = task_frame(profile)
    totals = {"need": 0.0, "want": 0.0}
    if df.empty:
        return totals
    open_items = df[~df["Complete"].astype(bool)]
    for category, total in open_items.groupby("Category")["Cost"].sum().items():
        totals[category] = float(total)
    return totals
