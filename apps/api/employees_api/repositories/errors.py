"""
repositories/errors.py
----------------------
Structured errors raised by the data access layer.
Callers branch on ``StorageError.kind`` instead of inspecting driver messages.
"""

import enum

from sqlalchemy.exc import IntegrityError


class StorageErrorKind(str, enum.Enum):
    CONFLICT = "conflict"  # unique constraint (Email) violated
    OTHER = "other"


class StorageError(Exception):
    """A write the store refused or failed to perform."""

    def __init__(self, kind: StorageErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class EmployeeNotFound(Exception):
    def __init__(self, employee_id: int):
        super().__init__(f"Employee {employee_id} not found")
        self.employee_id = employee_id


def classify_integrity_error(exc: IntegrityError) -> StorageErrorKind:
    """
    Map an IntegrityError to a StorageErrorKind using the SQLite extended
    result code carried by the driver exception.

    Email is the only UNIQUE column on the Employees table, so a unique
    violation is always an email conflict.
    """
    code = getattr(exc.orig, "sqlite_errorname", None)
    if code == "SQLITE_CONSTRAINT_UNIQUE":
        return StorageErrorKind.CONFLICT
    return StorageErrorKind.OTHER
