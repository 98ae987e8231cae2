API = "/api/v1"


def test_import_is_idempotent(client, catalog_records):
    first = client.post(f"{API}/exercises/import", json=catalog_records)
    assert first.status_code == 201
    assert first.json() == {"created": 43, "skipped": 0}
    again = client.post(f"{API}/exercises/import", json=catalog_records)
    assert again.json() == {"created": 0, "skipped": 43}


def test_import_rejects_invalid_rows(client):
    resp = client.post(f"{API}/exercises/import", json=[{"Exercise Name": "X" * 300}])
    assert resp.status_code == 422


def test_list_exercises_filters(seeded_client):
    back = seeded_client.get(f"{API}/exercises", params={"category": "Back"}).json()
    assert len(back) == 6
    chest_db = seeded_client.get(
        f"{API}/exercises", params={"category": "Chest", "equipment": ["dumbbells"]}
    ).json()
    assert sorted(e["name"] for e in chest_db) == ["Dumbbell Fly", "Incline Dumbbell Press"]
    paged = seeded_client.get(f"{API}/exercises", params={"category": "Back", "skip": 4, "limit": 10}).json()
    assert [e["name"] for e in paged] == [e["name"] for e in back][4:]
    assert all(e["id"] for e in paged)
    equipment = seeded_client.get(f"{API}/exercises/equipment").json()
    assert "Kettlebell" in equipment


def test_exercise_crud(seeded_client):
    resp = seeded_client.post(
        f"{API}/exercises",
        json={"name": "Zercher Squat", "primary_muscle": "Quads", "exercise_type": "Compound", "equipment": "Barbell"},
    )
    assert resp.status_code == 201
    exercise_id = resp.json()["id"]
    dup = seeded_client.post(f"{API}/exercises", json={"name": "Zercher Squat", "primary_muscle": "Quads"})
    assert dup.status_code == 409
    assert seeded_client.get(f"{API}/exercises/{exercise_id}").json()["name"] == "Zercher Squat"
    assert seeded_client.delete(f"{API}/exercises/{exercise_id}").status_code == 204
    assert seeded_client.get(f"{API}/exercises/{exercise_id}").status_code == 404


def test_generate_workout(seeded_client):
    resp = seeded_client.post(f"{API}/generator/workout", json={"workout_type": "upper", "seed": 7})
    assert resp.status_code == 200
    body = resp.json()
    assert body["workout_type"] == "upper"
    assert body["equipment"] == ["all"]
    names = [p["exercise"]["name"] for p in body["exercises"]]
    assert len(names) == 8
    assert len(set(names)) == 8
    for planned in body["exercises"]:
        assert planned["sets"] == 3
        assert planned["target_reps"] == 12
        assert planned["suggested_weight"] == 0


def test_generate_workout_with_superset_config(seeded_client):
    resp = seeded_client.post(
        f"{API}/generator/workout",
        json={"workout_type": "pull", "superset_config": [3, 3, 2], "equipment": ["all"], "seed": 1},
    )
    assert resp.status_code == 200
    assert [p["superset_index"] for p in resp.json()["exercises"]] == [0, 0, 0, 1, 1, 1, 2, 2]


def test_generate_workout_uses_stored_weight(seeded_client):
    seeded_client.put(f"{API}/preferences/Back Squat", json={"weight": 225, "target_reps": 6})
    # with the barbell filter Back Squat is the only quads exercise left
    resp = seeded_client.post(
        f"{API}/generator/workout", json={"workout_type": "legs", "equipment": ["barbell"], "seed": 3}
    )
    squat = [p for p in resp.json()["exercises"] if p["exercise"]["name"] == "Back Squat"]
    assert squat and squat[0]["suggested_weight"] == 225 and squat[0]["target_reps"] == 6


def test_generate_workout_validation(seeded_client):
    assert seeded_client.post(f"{API}/generator/workout", json={"superset_config": [0, 2]}).status_code == 422
    assert seeded_client.post(f"{API}/generator/workout", json={"superset_config": [10, 11]}).status_code == 422
    assert seeded_client.post(f"{API}/generator/workout", json={"workout_type": "cardio"}).status_code == 422


def test_generate_workout_needs_catalog(client):
    resp = client.post(f"{API}/generator/workout", json={"workout_type": "full"})
    assert resp.status_code == 422
    assert "empty" in resp.json()["detail"]


def test_substitute(seeded_client):
    resp = seeded_client.post(
        f"{API}/generator/substitute",
        json={"exercise_names": ["Barbell Bench Press", "Lat Pulldown"], "index": 0, "seed": 1},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["previous"] == "Barbell Bench Press"
    replacement = body["replacement"]["exercise"]
    assert replacement["name"] in ("Incline Dumbbell Press", "Push-Up")
    assert body["exercise_names"] == [replacement["name"], "Lat Pulldown"]
    assert body["replacement"]["sets"] == 3


def test_substitute_errors(seeded_client):
    url = f"{API}/generator/substitute"
    assert seeded_client.post(url, json={"exercise_names": ["Nope"], "index": 0}).status_code == 404
    assert seeded_client.post(url, json={"exercise_names": ["Plank"], "index": 1}).status_code == 422
    no_alt = seeded_client.post(url, json={"exercise_names": ["Hip Thrust"], "index": 0})
    assert no_alt.status_code == 422
    assert "No alternative" in no_alt.json()["detail"]
