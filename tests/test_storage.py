import json
import math
from datetime import date

from budgeting.data_model import FinancialItem, Profile
from budgeting.engine.storage import load_profiles, save_profiles


def _sample_profile():
    profile = Profile(name="Dana", income=4200.0, savings_balance=350.5)
    profile.set_allocations(50.0, 30.0, 20.0, True)
    profile.add_need(FinancialItem.need("Rent", 1500.0, date(2025, 2, 1)))
    want = FinancialItem.want("Camera", 899.99, date(2025, 8, 15))
    want.mark_complete()
    profile.add_want(want)
    return profile


def test_save_profiles_writes_versioned_document(tmp_path):
    path = tmp_path / "profiles.json"

    result = save_profiles(str(path), [_sample_profile()])

    assert result.ok
    with path.open("r", encoding="utf-8") as handle:
        stored = json.load(handle)
    assert stored["version"] == 1
    assert stored["profiles"][0]["name"] == "Dana"
    assert stored["profiles"][0]["needs"][0] == {
        "description": "Rent",
        "cost": 1500.0,
        "dueDate": "2025-02-01",
        "category": "need",
        "isComplete": False,
    }
    assert not (tmp_path / "profiles.json.tmp").exists()


def test_round_trip_preserves_full_profile_graph(tmp_path):
    path = str(tmp_path / "profiles.json")
    original = _sample_profile()

    save_profiles(path, [original])
    result = load_profiles(path)

    assert result.ok
    assert result.profiles == [original]
    assert result.profiles[0].wants[0].is_complete is True


def test_non_finite_values_survive_round_trip(tmp_path):
    path = str(tmp_path / "profiles.json")

    save_profiles(path, [Profile(name="Odd", income=float("inf"), savings_balance=math.nan)])
    loaded = load_profiles(path).profiles[0]

    assert loaded.income == float("inf")
    assert math.isnan(loaded.savings_balance)


def test_save_creates_missing_parent_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "profiles.json"

    result = save_profiles(str(path), [])

    assert result.ok
    assert path.exists()


def test_load_missing_file_returns_empty(tmp_path):
    result = load_profiles(str(tmp_path / "absent.json"))

    assert result.ok
    assert result.profiles == []


def test_load_empty_file_returns_empty(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text("   \n", encoding="utf-8")

    result = load_profiles(str(path))

    assert result.ok
    assert result.profiles == []


def test_load_accepts_bare_list(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps([{"name": "Lee", "income": 100}]), encoding="utf-8")

    result = load_profiles(str(path))

    assert [p.name for p in result.profiles] == ["Lee"]
    assert result.profiles[0].allocation_by_percentage is True


def test_load_corrupt_json_fails_soft(tmp_path, caplog):
    path = tmp_path / "profiles.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level("WARNING", logger="budgeting.engine.storage"):
        result = load_profiles(str(path))

    assert not result.ok
    assert result.profiles == []
    assert "Failed to load profiles" in result.error
    assert "Failed to load profiles" in caplog.text


def test_load_wrong_shape_fails_soft(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps({"profiles": [{"income": 10}]}), encoding="utf-8")

    result = load_profiles(str(path))

    assert not result.ok
    assert result.profiles == []


def test_load_bad_item_date_fails_soft(tmp_path):
    path = tmp_path / "profiles.json"
    record = {
        "name": "Kim",
        "needs": [{"description": "Rent", "cost": 10, "dueDate": "next week", "category": "need"}],
    }
    path.write_text(json.dumps([record]), encoding="utf-8")

    result = load_profiles(str(path))

    assert not result.ok
    assert result.profiles == []


def test_save_into_unwritable_location_reports_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a folder", encoding="utf-8")

    result = save_profiles(str(blocker / "profiles.json"), [Profile(name="X")])

    assert not result.ok
    assert "Failed to save profiles" in result.error


def test_load_item_that_is_not_an_object_fails_soft(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps([{"name": "A", "needs": ["oops"]}]), encoding="utf-8")

    result = load_profiles(str(path))

    assert not result.ok
    assert result.profiles == []
    assert "Item record must be an object" in result.error


def test_load_item_list_that_is_an_object_fails_soft(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps([{"name": "A", "needs": {"a": 1}}]), encoding="utf-8")

    result = load_profiles(str(path))

    assert not result.ok
    assert result.profiles == []
    assert "'needs' must be a list" in result.error
