import pytest
from fastapi.testclient import TestClient

from employees_api.core.config import Settings
from employees_api.core.database import Database
from employees_api.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(_env_file=None, db_file=tmp_path / "data" / "employees.db", max_list_limit=100)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def empty_client(settings):
    settings.seed_demo_data = False
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def database(tmp_path):
    db = Database(tmp_path / "employees.db")
    yield db
    db.dispose()


@pytest.fixture
def employee_body():
    def _make(**overrides):
        body = {
            "FirstName": "Lee",
            "LastName": "Park",
            "EmployeeType": "Intern",
            "Email": "lee.park@x.com",
            "BeginDate": "2025-01-01",
            "JobTitle": "Intern Eng",
        }
        body.update(overrides)
        return body

    return _make
