from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EmployeeFields(BaseModel):
    """Mutable employee fields as they arrive on the wire. Nothing is required here."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="FirstName")
    last_name: Optional[str] = Field(None, alias="LastName")
    employee_type: Optional[str] = Field(None, alias="EmployeeType")
    email: Optional[str] = Field(None, alias="Email")
    begin_date: Optional[str] = Field(None, alias="BeginDate")
    job_title: Optional[str] = Field(None, alias="JobTitle")
    manager: Optional[str] = Field(None, alias="Manager")


class EmployeeCreate(EmployeeFields):
    """Body for POST and PUT. Required fields are checked by ``services.validators``."""


class EmployeeUpdate(EmployeeFields):
    """Field-update set for PATCH: only fields present in the body are applied."""

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class EmployeeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    user_id: int = Field(alias="UserId")
    first_name: str = Field(alias="FirstName")
    last_name: str = Field(alias="LastName")
    employee_type: str = Field(alias="EmployeeType")
    email: str = Field(alias="Email")
    begin_date: str = Field(alias="BeginDate")
    job_title: str = Field(alias="JobTitle")
    manager: Optional[str] = Field(None, alias="Manager")
