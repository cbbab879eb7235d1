# app/models/__init__.py
from .department import DEPARTMENTS_TABLE
from .user import USERS_TABLE
from .employee import EMPLOYEES_TABLE, EMPLOYEE_FIELDS

# Creation order matters for the foreign key in employees
TABLES = [DEPARTMENTS_TABLE, USERS_TABLE, EMPLOYEES_TABLE]
