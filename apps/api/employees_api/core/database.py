from pathlib import Path
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from employees_api.core.logger import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


class Database:
    """
    Handle on the embedded SQLite store.

    One instance is opened per application (see ``main.lifespan``) and closed
    with ``dispose()`` on shutdown. Request handlers reach it through
    ``get_db`` instead of a module-level engine.
    """

    def __init__(self, db_file: Path, echo: bool = False):
        self.db_file = Path(db_file)
        # created on demand
        self.db_file.parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(
            f"sqlite:///{self.db_file}",
            echo=echo,
            connect_args={"check_same_thread": False},
        )
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info(f"Opened database at {self.db_file}")

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info(f"Closed database at {self.db_file}")


def get_db(request: Request) -> Generator[Session, None, None]:
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
