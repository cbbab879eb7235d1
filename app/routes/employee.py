# app/routes/employee.py
from typing import List, Dict, Any, Optional
from fastapi import APIRouter, HTTPException, Depends, status
from app.database import get_database
from app.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
from app.crud import employee as employee_crud
from aiosqlite import Connection

router = APIRouter()

def create_error_response(
    message: str,
    details: Optional[str] = None,
    example: Optional[str] = None
) -> Dict[str, Any]:
    """Create a detailed error response"""
    response = {
        "message": message,
        "details": details if details else message
    }
    if example:
        response["example"] = example
    return response

def employee_not_found(employee_id: int) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=create_error_response(
            message="Employee not found",
            details=f"No employee found with ID: {employee_id}",
            example="Please ensure you're using a valid employee ID"
        )
    )

@router.post("/employees/", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
async def create_employee(employee: EmployeeCreate, db: Connection = Depends(get_database)):
    new_id = await employee_crud.add_employee(db, employee.model_dump())
    created_employee = await employee_crud.get_employee(db, new_id)
    return EmployeeOut(**created_employee)

@router.get("/employees/", response_model=List[EmployeeOut])
async def get_employees(q: Optional[str] = None, db: Connection = Depends(get_database)):
    if q:
        employees = await employee_crud.search_employees(db, q)
    else:
        employees = await employee_crud.get_employees(db)
    return [EmployeeOut(**employee) for employee in employees]

@router.get("/employees/count")
async def get_employee_count(db: Connection = Depends(get_database)):
    return {"count": await employee_crud.get_employee_count(db)}

@router.get("/employees/{employee_id}", response_model=EmployeeOut)
async def get_employee(employee_id: int, db: Connection = Depends(get_database)):
    employee = await employee_crud.get_employee(db, employee_id)
    if employee is None:
        raise employee_not_found(employee_id)
    return EmployeeOut(**employee)

@router.patch("/employees/{employee_id}", response_model=EmployeeOut)
async def update_employee(employee_id: int, employee: EmployeeUpdate, db: Connection = Depends(get_database)):
    # Fields the client left out are not touched; an explicit null clears the column
    fields = employee.model_dump(exclude_unset=True)
    await employee_crud.update_employee(db, employee_id, fields, missing_ok=False)

    updated_employee = await employee_crud.get_employee(db, employee_id)
    if updated_employee is None:
        raise employee_not_found(employee_id)
    return EmployeeOut(**updated_employee)

@router.delete("/employees/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: int, db: Connection = Depends(get_database)):
    await employee_crud.delete_employee(db, employee_id, missing_ok=False)
