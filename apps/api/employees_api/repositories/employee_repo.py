"""
repositories/employee_repo.py
-----------------------------
Data access layer for employees.
All SQL touching the `Employees` table lives here.
"""

from typing import NoReturn, Optional

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from employees_api.core.logger import get_logger
from employees_api.models.employee import Employee
from employees_api.repositories.errors import (
    EmployeeNotFound,
    StorageError,
    StorageErrorKind,
    classify_integrity_error,
)

logger = get_logger(__name__)


# SQLite INTEGER is a signed 64-bit value
MAX_ROW_ID = 2**63 - 1


def _columns(fields: dict) -> dict:
    return {getattr(Employee, k): v for k, v in fields.items()}


def _in_range(employee_id: int) -> bool:
    return -MAX_ROW_ID - 1 <= employee_id <= MAX_ROW_ID


class EmployeeRepository:
    """Repository for CRUD operations on the Employees table."""

    def __init__(self, db: Session):
        self.db = db

    # ── READ ──────────────────────────────────────────────

    def list_filtered(
        self,
        employee_type: Optional[str] = None,
        manager: Optional[str] = None,
        q: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Employee]:
        """
        Filtered, paginated listing ordered by id.

        Args:
            employee_type: Exact match on EmployeeType.
            manager: Exact match on Manager.
            q: Case-insensitive substring of FirstName, LastName or Email.
            limit: Maximum number of rows.
            offset: Rows to skip.

        Returns:
            Employees in ascending id order.
        """
        stmt = select(Employee)
        if employee_type:
            stmt = stmt.where(Employee.employee_type == employee_type)
        if manager:
            stmt = stmt.where(Employee.manager == manager)
        if q:
            stmt = stmt.where(
                or_(
                    Employee.first_name.icontains(q, autoescape=True),
                    Employee.last_name.icontains(q, autoescape=True),
                    Employee.email.icontains(q, autoescape=True),
                )
            )
        stmt = stmt.order_by(Employee.user_id.asc()).limit(limit).offset(offset)
        return list(self.db.execute(stmt).scalars().all())

    def get(self, employee_id: int) -> Optional[Employee]:
        # no row can carry an id the column cannot store
        if not _in_range(employee_id):
            return None
        return self.db.get(Employee, employee_id, populate_existing=True)

    # ── WRITE ─────────────────────────────────────────────

    def create(self, fields: dict) -> Employee:
        """
        Insert a new employee.

        Args:
            fields: Column values keyed by attribute name; any id is ignored.

        Returns:
            The stored Employee with its assigned id.

        Raises:
            StorageError: CONFLICT on a duplicate email, OTHER for anything else.
        """
        fields = {k: v for k, v in fields.items() if k != "user_id"}
        emp = Employee(**fields)
        self.db.add(emp)
        self._commit("create")
        self.db.refresh(emp)
        logger.info(f"Created employee #{emp.user_id}")
        return emp

    def replace(self, employee_id: int, fields: dict) -> Employee:
        """
        Overwrite every mutable field of one employee.

        Raises:
            EmployeeNotFound: No row has this id; nothing was written.
            StorageError: CONFLICT on a duplicate email, OTHER for anything else.
        """
        if not _in_range(employee_id):
            raise EmployeeNotFound(employee_id)

        fields = {k: v for k, v in fields.items() if k != "user_id"}
        try:
            result = self.db.execute(
                update(Employee).where(Employee.user_id == employee_id).values(_columns(fields))
            )
        except SQLAlchemyError as e:
            self._fail("replace", e)

        if result.rowcount == 0:
            self.db.rollback()
            raise EmployeeNotFound(employee_id)

        self._commit("replace")
        logger.info(f"Replaced employee #{employee_id}")
        return self._read_back(employee_id)

    def update(self, employee_id: int, changes: dict) -> Employee:
        """
        Merge `changes` over the stored employee and write the result back.
        Fields absent from `changes` keep their current value.

        Raises:
            EmployeeNotFound: No row has this id.
            StorageError: CONFLICT on a duplicate email, OTHER for anything else.
        """
        emp = self.get(employee_id)
        if emp is None:
            raise EmployeeNotFound(employee_id)

        for key, value in changes.items():
            if key == "user_id":
                continue
            setattr(emp, key, value)

        self._commit("update")
        logger.info(f"Updated employee #{employee_id} ({', '.join(sorted(changes)) or 'no fields'})")
        return self._read_back(employee_id)

    def delete(self, employee_id: int) -> None:
        """
        Raises:
            EmployeeNotFound: No row has this id.
        """
        if not _in_range(employee_id):
            raise EmployeeNotFound(employee_id)

        try:
            result = self.db.execute(delete(Employee).where(Employee.user_id == employee_id))
        except SQLAlchemyError as e:
            self._fail("delete", e)

        if result.rowcount == 0:
            self.db.rollback()
            raise EmployeeNotFound(employee_id)

        self._commit("delete")
        logger.info(f"Deleted employee #{employee_id}")

    # ── HELPERS ───────────────────────────────────────────

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail(action, e)

    def _fail(self, action: str, exc: SQLAlchemyError) -> NoReturn:
        self.db.rollback()
        if isinstance(exc, IntegrityError):
            kind = classify_integrity_error(exc)
        else:
            kind = StorageErrorKind.OTHER
        raise StorageError(kind, f"Failed to {action} employee: {exc}") from exc

    def _read_back(self, employee_id: int) -> Employee:
        emp = self.get(employee_id)
        if emp is None:
            # deleted between the write and the read
            raise EmployeeNotFound(employee_id)
        return emp
