from sqlalchemy import Column, Integer, Text

from employees_api.core.database import Base


class Employee(Base):
    __tablename__ = "Employees"
    # AUTOINCREMENT so ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    user_id = Column("UserId", Integer, primary_key=True)

    first_name = Column("FirstName", Text, nullable=False)
    last_name = Column("LastName", Text, nullable=False)
    employee_type = Column("EmployeeType", Text, nullable=False)  # e.g. FullTime, Intern, Contractor
    email = Column("Email", Text, nullable=False, unique=True)
    begin_date = Column("BeginDate", Text, nullable=False)  # ISO date string YYYY-MM-DD
    job_title = Column("JobTitle", Text, nullable=False)

    # Manager's display name, not a foreign key
    manager = Column("Manager", Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Employee #{self.user_id} {self.email}>"
