import pytest
from fastapi.testclient import TestClient

from app.config import get_settings
from app.database import create_tables, open_connection


@pytest.fixture
async def db():
    conn = await open_connection(":memory:")
    await create_tables(conn)
    yield conn
    await conn.close()


@pytest.fixture
def client(tmp_path, monkeypatch):
    settings = get_settings()
    monkeypatch.setattr(settings, "DATABASE_PATH", str(tmp_path / "test.db"))
    monkeypatch.setattr(settings, "SEED_SAMPLE_DATA", False)

    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


def make_employee(email, **kwargs):
    employee = {
        "firstname": "Test",
        "lastname": "User",
        "email": email,
        "phone": "555-0000",
        "department_id": None,
    }
    employee.update(kwargs)
    return employee
