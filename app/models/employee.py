# app/models/employee.py

EMPLOYEES_TABLE = """
    CREATE TABLE IF NOT EXISTS employees (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        firstname TEXT,
        lastname TEXT,
        email TEXT NOT NULL UNIQUE,
        phone TEXT,
        department_id INTEGER,
        photo TEXT,
        FOREIGN KEY (department_id) REFERENCES departments (id)
    )
"""

# Columns a caller may write, in the order they appear in INSERT/UPDATE statements
EMPLOYEE_FIELDS = ("firstname", "lastname", "email", "phone", "department_id")

EMPLOYEE_SELECT = """
    SELECT employees.*, departments.name AS department
    FROM employees
    LEFT JOIN departments ON employees.department_id = departments.id
"""
