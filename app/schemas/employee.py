# app/schemas/employee.py
from typing import Optional
from pydantic import BaseModel, field_validator

class EmployeeBase(BaseModel):
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    phone: Optional[str] = None
    department_id: Optional[int] = None

class EmployeeCreate(EmployeeBase):
    email: str

class EmployeeUpdate(EmployeeBase):
    # Only fields the client actually sent are written (see exclude_unset in the route)
    email: Optional[str] = None

    @field_validator("email")
    @classmethod
    def email_not_null(cls, value):
        if value is None:
            raise ValueError("email cannot be cleared")
        return value

class EmployeeOut(EmployeeBase):
    id: int
    email: str
    photo: Optional[str] = None
    department: Optional[str] = None
