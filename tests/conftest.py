import json
import os
import sys
import tempfile
from pathlib import Path

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

# Point the app at a throwaway SQLite file before any goodlift module reads settings
_TMP_DIR = tempfile.mkdtemp(prefix="goodlift-tests-")
DB_PATH = os.path.join(_TMP_DIR, "test.db")
os.environ["DATABASE_DSN"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ["ENVIRONMENT"] = "test"

from fastapi.testclient import TestClient  # noqa: E402

from goodlift.services.catalog import ExerciseCatalog, load_catalog_file  # noqa: E402

CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "exercises.json"


@pytest.fixture
def catalog() -> ExerciseCatalog:
    return load_catalog_file(CATALOG_PATH)


@pytest.fixture
def catalog_records() -> list:
    return json.loads(CATALOG_PATH.read_text(encoding="utf-8"))


@pytest.fixture
def client():
    from goodlift.main import app

    with TestClient(app) as test_client:
        yield test_client
    # lifespan disposed the engine, so the file is free to go
    if os.path.exists(DB_PATH):
        os.remove(DB_PATH)


@pytest.fixture
def seeded_client(client, catalog_records):
    resp = client.post("/api/v1/exercises/import", json=catalog_records)
    assert resp.status_code == 201
    return client
