# app/schemas/department.py
from pydantic import BaseModel

class DepartmentCreate(BaseModel):
    name: str

class DepartmentOut(DepartmentCreate):
    id: int
