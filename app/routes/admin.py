# app/routes/admin.py
from typing import List
from fastapi import APIRouter, Depends, status
from app.database import get_database
from app.schemas import DashboardOut, DepartmentCreate, DepartmentOut, UserOut
from app.crud import department as department_crud
from app.crud import employee as employee_crud
from app.crud import user as user_crud
from aiosqlite import Connection

router = APIRouter(prefix="/admin")

@router.get("/dashboard", response_model=DashboardOut)
async def dashboard(db: Connection = Depends(get_database)):
    return DashboardOut(
        employees_count=await employee_crud.get_employee_count(db),
        departments_count=await department_crud.get_department_count(db),
        users_count=await user_crud.get_user_count(db),
    )

@router.get("/departments", response_model=List[DepartmentOut])
async def get_departments(db: Connection = Depends(get_database)):
    departments = await department_crud.get_departments(db)
    return [DepartmentOut(**department) for department in departments]

@router.post("/departments", response_model=DepartmentOut, status_code=status.HTTP_201_CREATED)
async def create_department(department: DepartmentCreate, db: Connection = Depends(get_database)):
    new_id = await department_crud.add_department(db, department.name)
    return DepartmentOut(id=new_id, name=department.name)

@router.get("/users", response_model=List[UserOut])
async def get_users(db: Connection = Depends(get_database)):
    users = await user_crud.get_users(db)
    return [UserOut(**user) for user in users]
