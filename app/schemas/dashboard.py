# app/schemas/dashboard.py
from pydantic import BaseModel

class DashboardOut(BaseModel):
    employees_count: int
    departments_count: int
    users_count: int
