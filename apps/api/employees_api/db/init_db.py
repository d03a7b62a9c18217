"""
db/init_db.py
-------------
Creates the Employees table if it does not already exist and seeds the
demonstration rows into an empty table.
"""

from pathlib import Path

from sqlalchemy import func, select

from employees_api.core.database import Base, Database
from employees_api.core.logger import get_logger
from employees_api.models.employee import Employee

logger = get_logger(__name__)

SEED_EMPLOYEES = [
    {
        "first_name": "Asha",
        "last_name": "Verma",
        "employee_type": "FullTime",
        "email": "asha.verma@example.com",
        "begin_date": "2024-01-10",
        "job_title": "Software Engineer",
        "manager": "Ravi Kumar",
    },
    {
        "first_name": "Ravi",
        "last_name": "Kumar",
        "employee_type": "FullTime",
        "email": "ravi.kumar@example.com",
        "begin_date": "2022-09-01",
        "job_title": "Engineering Manager",
        "manager": None,
    },
    {
        "first_name": "Meera",
        "last_name": "Iyer",
        "employee_type": "Contractor",
        "email": "meera.iyer@example.com",
        "begin_date": "2025-06-01",
        "job_title": "UX Designer",
        "manager": "Ravi Kumar",
    },
]


def create_tables(database: Database) -> None:
    """Safe to call multiple times (CREATE TABLE IF NOT EXISTS)."""
    try:
        Base.metadata.create_all(bind=database.engine)
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise
    logger.info("Database schema initialized successfully.")


def seed(database: Database) -> int:
    """
    Insert the demo rows if the table is empty.

    The count and the inserts share one transaction, so either all rows
    land or none do.

    Returns:
        Number of rows inserted (0 when the table already had data).
    """
    with database.SessionLocal.begin() as db:
        already = db.scalar(select(func.count()).select_from(Employee))
        if already:
            logger.info(f"Seed skipped, {already} employee(s) already present.")
            return 0
        db.add_all([Employee(**row) for row in SEED_EMPLOYEES])

    logger.info(f"Seeded {len(SEED_EMPLOYEES)} demo employees.")
    return len(SEED_EMPLOYEES)


def init_db(database: Database, seed_demo_data: bool = True) -> None:
    create_tables(database)
    if seed_demo_data:
        seed(database)


def reset_db(db_file: Path) -> None:
    """Remove the database file. Missing files are not an error."""
    Path(db_file).unlink(missing_ok=True)
    logger.info("Database removed.")
