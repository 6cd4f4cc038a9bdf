"""REST backend exposing profiles, budgets and goal projections to a UI layer."""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Dict, List

from flask import Flask, jsonify, request

from budgeting.config import API_PORT, configure_logging
from budgeting.data_model import NEED, WANT, FinancialItem, Profile
from budgeting.engine import (
    ProfileStore,
    allocation_summary,
    apply_savings_to_profile,
    open_cost_by_category,
    project_goal,
    projection_table,
    task_frame,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)

store = ProfileStore()

KIND_TO_CATEGORY = {"needs": NEED, "wants": WANT}


class PayloadError(ValueError):
    pass


def _is_nan(value: Any) -> bool:
    try:
        return not math.isfinite(value)
    except (TypeError, ValueError):
        return False


def _sanitize_json_compat(value: Any):
    if isinstance(value, float):
        return None if _is_nan(value) else value
    if isinstance(value, dict):
        return {key: _sanitize_json_compat(val) for key, val in value.items()}
    if isinstance(value, list):
        return [_sanitize_json_compat(item) for item in value]
    return value


def _sanitize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    clean_rows: List[Dict[str, Any]] = []
    for row in records:
        clean_rows.append({key: (None if _is_nan(value) else value) for key, value in row.items()})
    return clean_rows


def _json_payload() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise PayloadError("Request body must be a JSON object.")
    return payload


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _parse_amount(value: Any, field_name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise PayloadError(f"'{field_name}' must be a number.")


def _parse_date(value: Any, field_name: str) -> date:
    try:
        return date.fromisoformat(str(value).strip())
    except (TypeError, ValueError):
        raise PayloadError(f"'{field_name}' must be a date in YYYY-MM-DD format.")


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on", "%", "percentage"}
    return bool(value)


def _profile_payload(profile: Profile) -> Dict[str, Any]:
    payload = profile.to_record()
    payload["label"] = str(profile)
    payload["openCosts"] = open_cost_by_category(profile)
    return _sanitize_json_compat(payload)


def _not_found(name: str):
    return jsonify({"error": f"Profile '{name}' not found."}), 404


def _item_at(profile: Profile, kind: str, index: int) -> FinancialItem:
    items = profile.items_for(KIND_TO_CATEGORY[kind])
    if index < 0 or index >= len(items):
        raise IndexError(index)
    return items[index]


@app.errorhandler(PayloadError)
def handle_payload_error(exc: PayloadError):
    return jsonify({"error": str(exc)}), 400


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,PUT,PATCH,DELETE,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok", "storageError": store.last_error})


@app.get("/api/profiles")
def list_profiles():
    profiles = [{"name": profile.name, "label": str(profile)} for profile in store.get_profiles()]
    return jsonify({"profiles": profiles})


@app.post("/api/profiles")
def create_profile():
    payload = _json_payload()
    name = str(payload.get("name", "")).strip()
    if not name:
        return jsonify({"error": "Profile name is required."}), 400
    if store.find_profile_by_name(name) is not None:
        return jsonify({"error": f"Profile '{name}' already exists."}), 409
    profile = Profile(
        name=name,
        income=_parse_amount(_extract_payload_value(payload, "income", default=0.0), "income"),
        savings_balance=_parse_amount(
            _extract_payload_value(payload, "savingsBalance", "savings_balance", default=0.0),
            "savingsBalance",
        ),
    )
    store.add_profile(profile)
    logger.info("Created profile %s", name)
    return jsonify({"message": "Profile created.", "profile": _profile_payload(profile)}), 201


@app.get("/api/profiles/<name>")
def get_profile(name: str):
    profile = store.find_profile_by_name(name)
    if profile is None:
        return _not_found(name)
    return jsonify(_profile_payload(profile))


@app.put("/api/profiles/<name>")
def update_profile(name: str):
    payload = _json_payload()
    updates: Dict[str, float] = {}
    income = _extract_payload_value(payload, "income")
    if income is not None:
        updates["income"] = _parse_amount(income, "income")
    balance = _extract_payload_value(payload, "savingsBalance", "savings_balance")
    if balance is not None:
        updates["savings_balance"] = _parse_amount(balance, "savingsBalance")

    def apply(profile: Profile) -> Profile:
        for attr, value in updates.items():
            setattr(profile, attr, value)
        return profile

    try:
        profile = store.with_profile(name, apply)
    except KeyError:
        return _not_found(name)
    return jsonify(_profile_payload(profile))


@app.delete("/api/profiles/<name>")
def delete_profile(name: str):
    profile = store.find_profile_by_name(name)
    if profile is None:
        return _not_found(name)
    store.delete_profile(profile)
    logger.info("Deleted profile %s", profile.name)
    return jsonify({"message": "Profile deleted.", "profiles": store.list_names()})


@app.put("/api/profiles/<name>/allocations")
def set_allocations(name: str):
    payload = _json_payload()
    needs = _parse_amount(_extract_payload_value(payload, "needs", "needsAllocation", default=0.0), "needs")
    wants = _parse_amount(_extract_payload_value(payload, "wants", "wantsAllocation", default=0.0), "wants")
    savings = _parse_amount(
        _extract_payload_value(payload, "savings", "savingsAllocation", default=0.0), "savings"
    )
    by_percentage = _parse_bool(
        _extract_payload_value(payload, "byPercentage", "allocationByPercentage", default=True)
    )

    def allocate(profile: Profile) -> dict:
        profile.set_allocations(needs, wants, savings, by_percentage)
        return allocation_summary(profile)

    try:
        summary = store.with_profile(name, allocate)
    except KeyError:
        return _not_found(name)
    return jsonify(_sanitize_json_compat(summary))


@app.get("/api/profiles/<name>/budget")
def get_budget(name: str):
    profile = store.find_profile_by_name(name)
    if profile is None:
        return _not_found(name)
    return jsonify(_sanitize_json_compat(allocation_summary(profile)))


@app.post("/api/profiles/<name>/savings/apply")
def apply_savings(name: str):
    try:
        applied = store.with_profile(name, apply_savings_to_profile)
    except KeyError:
        return _not_found(name)
    profile = store.find_profile_by_name(name)
    return jsonify(_sanitize_json_compat({"applied": applied, "savingsBalance": profile.savings_balance}))


@app.post("/api/profiles/<name>/<any(needs, wants):kind>")
def add_item(name: str, kind: str):
    payload = _json_payload()
    description = str(payload.get("description", "")).strip()
    if not description:
        return jsonify({"error": "Description is required."}), 400
    item = FinancialItem(
        description=description,
        cost=_parse_amount(payload.get("cost"), "cost"),
        due_date=_parse_date(_extract_payload_value(payload, "dueDate", "targetDate"), "dueDate"),
        category=KIND_TO_CATEGORY[kind],
    )

    def add(profile: Profile) -> Profile:
        if kind == "needs":
            profile.add_need(item)
        else:
            profile.add_want(item)
        return profile

    try:
        profile = store.with_profile(name, add)
    except KeyError:
        return _not_found(name)
    return jsonify({"item": item.to_record(), "profile": _profile_payload(profile)}), 201


@app.patch("/api/profiles/<name>/<any(needs, wants):kind>/<int:index>")
def edit_item(name: str, kind: str, index: int):
    payload = _json_payload()
    description = payload.get("description")
    if description is not None and not str(description).strip():
        return jsonify({"error": "Description cannot be empty."}), 400
    cost = payload.get("cost")
    due_date = _extract_payload_value(payload, "dueDate", "targetDate")
    changes = {
        "description": str(description).strip() if description is not None else None,
        "cost": _parse_amount(cost, "cost") if cost is not None else None,
        "due_date": _parse_date(due_date, "dueDate") if due_date is not None else None,
    }

    def edit(profile: Profile) -> FinancialItem:
        item = _item_at(profile, kind, index)
        item.update(**changes)
        return item

    try:
        item = store.with_profile(name, edit)
    except KeyError:
        return _not_found(name)
    except IndexError:
        return jsonify({"error": f"No {kind[:-1]} at position {index}."}), 404
    return jsonify({"item": item.to_record()})


@app.delete("/api/profiles/<name>/<any(needs, wants):kind>/<int:index>")
def remove_item(name: str, kind: str, index: int):
    def remove(profile: Profile) -> Profile:
        item = _item_at(profile, kind, index)
        if kind == "needs":
            profile.remove_need(item)
        else:
            profile.remove_want(item)
        return profile

    try:
        profile = store.with_profile(name, remove)
    except KeyError:
        return _not_found(name)
    except IndexError:
        return jsonify({"error": f"No {kind[:-1]} at position {index}."}), 404
    return jsonify({"profile": _profile_payload(profile)})


@app.post("/api/profiles/<name>/<any(needs, wants):kind>/<int:index>/complete")
def complete_item(name: str, kind: str, index: int):
    def complete(profile: Profile) -> FinancialItem:
        item = _item_at(profile, kind, index)
        item.mark_complete()
        return item

    try:
        item = store.with_profile(name, complete)
    except KeyError:
        return _not_found(name)
    except IndexError:
        return jsonify({"error": f"No {kind[:-1]} at position {index}."}), 404
    return jsonify({"item": item.to_record()})


@app.get("/api/profiles/<name>/tasks")
def get_tasks(name: str):
    profile = store.find_profile_by_name(name)
    if profile is None:
        return _not_found(name)
    records = _sanitize_records(task_frame(profile).to_dict(orient="records"))
    return jsonify({"tasks": records})


def _contribution_arg() -> float:
    return _parse_amount(request.args.get("contribution", 0.0), "contribution")


@app.get("/api/profiles/<name>/wants/<int:index>/projection")
def get_goal_projection(name: str, index: int):
    contribution = _contribution_arg()
    profile = store.find_profile_by_name(name)
    if profile is None:
        return _not_found(name)
    try:
        want = _item_at(profile, "wants", index)
    except IndexError:
        return jsonify({"error": f"No want at position {index}."}), 404
    projection = project_goal(want, profile, contribution)
    return jsonify(
        _sanitize_json_compat(
            {
                "description": projection.description,
                "monthlyContribution": projection.monthly_contribution,
                "monthsNeeded": projection.months_needed,
                "status": projection.status,
            }
        )
    )


@app.get("/api/profiles/<name>/projections")
def get_projections(name: str):
    contribution = _contribution_arg()
    profile = store.find_profile_by_name(name)
    if profile is None:
        return _not_found(name)
    df = projection_table(profile, contribution)
    records = _sanitize_records(df.to_dict(orient="records"))
    return jsonify({"monthlyContribution": _sanitize_json_compat(contribution), "projections": records})


if __name__ == "__main__":
    configure_logging()
    app.run(debug=False, port=API_PORT)
