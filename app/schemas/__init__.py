# app/schemas/__init__.py
from .employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
from .department import DepartmentCreate, DepartmentOut
from .user import UserOut
from .dashboard import DashboardOut
