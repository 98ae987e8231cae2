from goodlift.services.equipment import EquipmentFilter


def test_all_and_empty_match_everything():
    for value in (None, "all", ["All"], [], ["dumbbell", "ALL"], ["  "]):
        eq = EquipmentFilter.parse(value)
        assert eq.is_all
        assert eq.matches("Barbell")
        assert eq.matches(None)
        assert eq.as_list() == ["all"]


def test_substring_match_is_case_insensitive():
    eq = EquipmentFilter.parse(["Dumbbell"])
    assert eq.matches("Dumbbell")
    assert eq.matches("Adjustable dumbbells")
    assert not eq.matches("Barbell")
    assert not eq.matches(None)


def test_aliases():
    assert EquipmentFilter.parse("cable machine").matches("Cable")
    assert EquipmentFilter.parse(["Dumbbells"]).matches("Dumbbell")
    assert EquipmentFilter.parse(["kettlebells"]).as_list() == ["kettlebell"]


def test_any_selected_equipment_matches():
    eq = EquipmentFilter.parse(["barbell", "cable"])
    assert eq.matches("Cable")
    assert eq.matches("EZ Barbell")
    assert not eq.matches("Machine")
