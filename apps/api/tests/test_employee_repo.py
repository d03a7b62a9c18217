import pytest

from employees_api.db.init_db import SEED_EMPLOYEES, init_db
from employees_api.repositories.employee_repo import EmployeeRepository
from employees_api.repositories.errors import EmployeeNotFound, StorageError, StorageErrorKind


@pytest.fixture
def repo(database):
    init_db(database)
    with database.session() as db:
        yield EmployeeRepository(db)


def _fields(**overrides):
    fields = {
        "first_name": "Lee",
        "last_name": "Park",
        "employee_type": "Intern",
        "email": "lee.park@x.com",
        "begin_date": "2025-01-01",
        "job_title": "Intern Eng",
        "manager": None,
    }
    fields.update(overrides)
    return fields


def test_create_assigns_next_id(repo):
    emp = repo.create(_fields())
    assert emp.user_id == 4
    assert repo.get(4).email == "lee.park@x.com"


def test_duplicate_email_is_conflict_kind(repo):
    with pytest.raises(StorageError) as info:
        repo.create(_fields(email=SEED_EMPLOYEES[1]["email"]))
    assert info.value.kind == StorageErrorKind.CONFLICT

    # session is usable again after the failed write
    assert len(repo.list_filtered()) == 3


def test_not_null_violation_is_other_kind(repo):
    with pytest.raises(StorageError) as info:
        repo.create(_fields(first_name=None))
    assert info.value.kind == StorageErrorKind.OTHER


def test_replace_conflict_kind(repo):
    with pytest.raises(StorageError) as info:
        repo.replace(2, _fields(email=SEED_EMPLOYEES[0]["email"]))
    assert info.value.kind == StorageErrorKind.CONFLICT
    assert repo.get(2).email == SEED_EMPLOYEES[1]["email"]


def test_replace_and_delete_missing_raise_not_found(repo):
    with pytest.raises(EmployeeNotFound):
        repo.replace(42, _fields())
    with pytest.raises(EmployeeNotFound):
        repo.update(42, {"job_title": "X"})
    with pytest.raises(EmployeeNotFound):
        repo.delete(42)


def test_update_merges_over_existing(repo):
    emp = repo.update(1, {"job_title": "Staff Engineer", "manager": None})
    assert emp.job_title == "Staff Engineer"
    assert emp.manager is None
    assert emp.first_name == "Asha"
    assert emp.email == SEED_EMPLOYEES[0]["email"]


def test_update_ignores_id_changes(repo):
    emp = repo.update(1, {"user_id": 99, "job_title": "X"})
    assert emp.user_id == 1
    assert repo.get(99) is None


def test_list_filtered_combines_filters(repo):
    names = [e.first_name for e in repo.list_filtered(manager="Ravi Kumar", q="IYER")]
    assert names == ["Meera"]


def test_ids_outside_sqlite_range_are_not_found(repo):
    huge = 2**64
    assert repo.get(huge) is None
    assert repo.get(-huge) is None
    with pytest.raises(EmployeeNotFound):
        repo.replace(huge, _fields())
    with pytest.raises(EmployeeNotFound):
        repo.update(huge, {"job_title": "X"})
    with pytest.raises(EmployeeNotFound):
        repo.delete(huge)
