from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from employees_api.core.config import Settings, current_settings
from employees_api.core.database import get_db
from employees_api.core.logger import get_logger
from employees_api.repositories.employee_repo import MAX_ROW_ID, EmployeeRepository
from employees_api.repositories.errors import EmployeeNotFound, StorageError, StorageErrorKind
from employees_api.schemas.employees import EmployeeCreate, EmployeeOut, EmployeeUpdate
from employees_api.services.validators import missing_required_fields, null_required_fields

logger = get_logger(__name__)

router = APIRouter()


def get_repo(db: Session = Depends(get_db)) -> EmployeeRepository:
    return EmployeeRepository(db)


def _raise_storage_error(e: StorageError):
    if e.kind == StorageErrorKind.CONFLICT:
        logger.warning(str(e))
        raise HTTPException(status_code=409, detail="Email already exists")
    # keep driver details out of the response
    logger.error(str(e), exc_info=e)
    raise HTTPException(status_code=500, detail="Internal error")


def _require_fields(payload: EmployeeCreate) -> None:
    missing = missing_required_fields(payload)
    if missing:
        raise HTTPException(status_code=400, detail=f"Missing fields: {', '.join(missing)}")


@router.get("", response_model=list[EmployeeOut])
@router.get("/", response_model=list[EmployeeOut])
def list_employees(
    employee_type: Optional[str] = Query(None, alias="type"),
    manager: Optional[str] = None,
    q: Optional[str] = None,
    limit: int = Query(50, ge=0),
    offset: int = Query(0, ge=0, le=MAX_ROW_ID),
    repo: EmployeeRepository = Depends(get_repo),
    settings: Settings = Depends(current_settings),
):
    if limit > settings.max_list_limit:
        raise HTTPException(status_code=400, detail=f"limit must be <= {settings.max_list_limit}")

    return repo.list_filtered(
        employee_type=employee_type,
        manager=manager,
        q=q,
        limit=limit,
        offset=offset,
    )


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: int, repo: EmployeeRepository = Depends(get_repo)):
    emp = repo.get(employee_id)
    if not emp:
        raise HTTPException(status_code=404, detail="Not found")
    return emp


@router.post("", response_model=EmployeeOut, status_code=201)
@router.post("/", response_model=EmployeeOut, status_code=201)
def create_employee(payload: EmployeeCreate, repo: EmployeeRepository = Depends(get_repo)):
    _require_fields(payload)

    try:
        return repo.create(payload.model_dump())
    except StorageError as e:
        _raise_storage_error(e)


@router.put("/{employee_id}", response_model=EmployeeOut)
def replace_employee(
    employee_id: int,
    payload: EmployeeCreate,
    repo: EmployeeRepository = Depends(get_repo),
):
    _require_fields(payload)

    try:
        return repo.replace(employee_id, payload.model_dump())
    except EmployeeNotFound:
        raise HTTPException(status_code=404, detail="Not found")
    except StorageError as e:
        _raise_storage_error(e)


@router.patch("/{employee_id}", response_model=EmployeeOut)
def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    repo: EmployeeRepository = Depends(get_repo),
):
    changes = payload.changes()

    # Manager is the only nullable column
    nulls = null_required_fields(changes)
    if nulls:
        raise HTTPException(status_code=400, detail=f"Fields cannot be null: {', '.join(nulls)}")

    try:
        return repo.update(employee_id, changes)
    except EmployeeNotFound:
        raise HTTPException(status_code=404, detail="Not found")
    except StorageError as e:
        _raise_storage_error(e)


@router.delete("/{employee_id}", status_code=204)
def delete_employee(employee_id: int, repo: EmployeeRepository = Depends(get_repo)):
    try:
        repo.delete(employee_id)
    except EmployeeNotFound:
        raise HTTPException(status_code=404, detail="Not found")
    except StorageError as e:
        _raise_storage_error(e)
    return Response(status_code=204)
