from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from regear.adapters.sqlite.migrator import SQLiteMigrator
from regear.api.deps import get_settings

PROJECT_ROOT = Path(__file__).parent.parent

ROSTER_CSV = """name,id,guild
Aldric,1001,Maharlika
brann,1002,Maharlika
#NAME?,1003,Maharlika
Kal,1004,Maharlika

Zephyr,1005,Maharlika
"""


@pytest.fixture
def test_data_dir(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def db_path(test_data_dir: Path) -> str:
    """
    Path of a temporary SQLite DB with every migration applied.
    """
    path = str(test_data_dir / "regear.db")
    SQLiteMigrator(path, str(PROJECT_ROOT / "migrations")).run_migrations()
    return path


@pytest.fixture
def client(test_data_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """
    API client backed by a temporary data dir holding a small roster.
    Startup runs migrations and seeds the default presets.
    """
    (test_data_dir / "members.csv").write_text(ROSTER_CSV)
    monkeypatch.setenv("REGEAR_DATA_DIR", str(test_data_dir))
    monkeypatch.setenv("REGEAR_RULES_PATH", str(PROJECT_ROOT / "rules.yaml"))
    monkeypatch.setenv("REGEAR_MIGRATIONS_DIR", str(PROJECT_ROOT / "migrations"))
    get_settings.cache_clear()

    from regear.api.main import app

    with TestClient(app) as test_client:
        yield test_client

    get_settings.cache_clear()
