import json

import pytest

from goodlift.core.errors import CatalogError
from goodlift.services.catalog import (
    ExerciseCatalog,
    load_catalog_file,
    muscle_category,
    normalize_muscle,
)


def test_normalize_muscle_strips_detail():
    assert normalize_muscle("Chest (Upper)") == "Chest"
    assert normalize_muscle("Lats") == "Lats"
    assert normalize_muscle("") == ""


def test_muscle_category_maps_detailed_muscles():
    assert muscle_category("Lats") == "Back"
    assert muscle_category("Rear Delts") == "Shoulders"
    assert muscle_category("Obliques") == "Core"
    assert muscle_category("Adductors") == "Glutes"
    assert muscle_category("Forearms") == "Biceps"
    assert muscle_category("Full Body") == "All"
    assert muscle_category("Neck") == "Neck"


def test_catalog_file_groups_by_normalized_muscle(catalog):
    assert len(catalog) == 43
    assert "Incline Dumbbell Press" in {ex.name for ex in catalog.by_muscle["Chest"]}
    assert "Chest (Upper)" not in catalog.by_muscle
    # catalog order is kept inside a muscle
    assert [ex.name for ex in catalog.by_muscle["Biceps"]] == [
        "Barbell Curl",
        "Hammer Curl",
        "Cable Curl",
        "Chin-Up",
    ]


def test_spreadsheet_column_headers_are_read(catalog):
    bench = catalog.get("Barbell Bench Press")
    assert bench.primary_muscle == "Chest"
    assert bench.secondary_muscles == "Triceps, Front Delts"
    assert bench.exercise_type == "Compound"
    assert bench.demo_url.startswith("https://")
    assert catalog.get("Push-Up").modification == "Elevate hands on a bench to make it easier"


def test_rows_without_name_are_skipped():
    catalog = ExerciseCatalog.from_records(
        [
            {"Exercise Name": "Plank", "Primary Muscle": "Core"},
            {"Exercise Name": "  ", "Primary Muscle": "Core"},
            {"Primary Muscle": "Chest"},
            {"name": "Leg Curl", "primary_muscle": "Hamstrings"},
        ]
    )
    assert [ex.name for ex in catalog] == ["Plank", "Leg Curl"]


def test_invalid_record_raises_catalog_error():
    with pytest.raises(CatalogError):
        ExerciseCatalog.from_records([{"Exercise Name": "X" * 300}])


def test_load_catalog_file_errors(tmp_path):
    with pytest.raises(CatalogError, match="not found"):
        load_catalog_file(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogError, match="not valid JSON"):
        load_catalog_file(broken)

    not_list = tmp_path / "object.json"
    not_list.write_text(json.dumps({"Exercise Name": "Plank"}), encoding="utf-8")
    with pytest.raises(CatalogError, match="JSON array"):
        load_catalog_file(not_list)


def test_filter_by_category_and_equipment(catalog):
    back = catalog.filter(category="Back")
    assert back and all(muscle_category(ex.primary_muscle) == "Back" for ex in back)
    assert {ex.name for ex in catalog.filter("Chest", "dumbbell")} == {"Incline Dumbbell Press", "Dumbbell Fly"}
    assert len(catalog.filter("all")) == len(catalog)


def test_equipment_options_are_sorted_and_distinct(catalog):
    assert catalog.equipment_options() == ["Barbell", "Bodyweight", "Cable", "Dumbbell", "Kettlebell", "Machine"]
