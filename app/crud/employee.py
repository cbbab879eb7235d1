# app/crud/employee.py
"""Data-access functions for the employees table.

Every function takes the shared connection as its first argument and returns
plain dicts or scalars. Driver failures are logged and re-raised as
StoreError (UniqueConstraintError for email collisions).
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

import aiosqlite

from app.errors import EmptyUpdateError, NotFoundError, store_error
from app.models.employee import EMPLOYEE_FIELDS, EMPLOYEE_SELECT

logger = logging.getLogger(__name__)


def build_update_statement(employee_id: int, fields: Mapping[str, Any]) -> Tuple[str, List[Any]]:
    """Build a parameterized UPDATE covering only the fields present in `fields`.

    Presence is membership in the mapping, so None clears a column and falsy
    values such as "" or 0 are written as given. Keys outside EMPLOYEE_FIELDS
    are ignored. The id is appended last to bind the WHERE clause.

    Raises:
        EmptyUpdateError: if no updatable field is present.
    """
    clauses = []
    params = []
    for field in EMPLOYEE_FIELDS:
        if field in fields:
            clauses.append(f"{field} = ?")
            params.append(fields[field])

    if not clauses:
        raise EmptyUpdateError("No updatable employee fields supplied")

    params.append(employee_id)
    sql = f"UPDATE employees SET {', '.join(clauses)} WHERE id = ?"
    return sql, params


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


async def get_employees(db: aiosqlite.Connection) -> List[Dict[str, Any]]:
    sql = f"{EMPLOYEE_SELECT} ORDER BY employees.id DESC"
    try:
        async with db.execute(sql) as cursor:
            rows = await cursor.fetchall()
    except aiosqlite.Error as e:
        raise store_error("get_employees", e) from e
    return [dict(row) for row in rows]


async def get_employee(db: aiosqlite.Connection, employee_id: int) -> Optional[Dict[str, Any]]:
    """Fetch one employee with its department name, or None if absent."""
    sql = f"{EMPLOYEE_SELECT} WHERE employees.id = ?"
    try:
        async with db.execute(sql, (employee_id,)) as cursor:
            row = await cursor.fetchone()
    except aiosqlite.Error as e:
        raise store_error("get_employee", e) from e
    return dict(row) if row else None


async def add_employee(db: aiosqlite.Connection, employee: Mapping[str, Any]) -> int:
    """Insert one employee and return the generated id.

    Only EMPLOYEE_FIELDS are written; missing keys are stored as NULL.
    """
    columns = ", ".join(EMPLOYEE_FIELDS)
    placeholders = ", ".join("?" for _ in EMPLOYEE_FIELDS)
    sql = f"INSERT INTO employees ({columns}) VALUES ({placeholders})"
    params = [employee.get(field) for field in EMPLOYEE_FIELDS]
    try:
        async with db.execute(sql, params) as cursor:
            new_id = cursor.lastrowid
    except aiosqlite.Error as e:
        raise store_error("add_employee", e) from e
    logger.info("Employee saved to %s", new_id)
    return new_id


async def update_employee(
    db: aiosqlite.Connection,
    employee_id: int,
    fields: Mapping[str, Any],
    missing_ok: bool = True,
) -> int:
    """Apply a partial update and return the number of rows affected.

    With missing_ok=False a 0-row update raises NotFoundError instead.
    """
    sql, params = build_update_statement(employee_id, fields)
    try:
        async with db.execute(sql, params) as cursor:
            changes = cursor.rowcount
    except aiosqlite.Error as e:
        raise store_error("update_employee", e) from e
    if changes == 0 and not missing_ok:
        raise NotFoundError(f"No employee found with ID: {employee_id}")
    return changes


async def delete_employee(db: aiosqlite.Connection, employee_id: int, missing_ok: bool = True) -> int:
    try:
        async with db.execute("DELETE FROM employees WHERE id = ?", (employee_id,)) as cursor:
            changes = cursor.rowcount
    except aiosqlite.Error as e:
        raise store_error("delete_employee", e) from e
    if changes == 0 and not missing_ok:
        raise NotFoundError(f"No employee found with ID: {employee_id}")
    return changes


async def get_employee_count(db: aiosqlite.Connection) -> int:
    try:
        async with db.execute("SELECT COUNT(*) AS count FROM employees") as cursor:
            row = await cursor.fetchone()
    except aiosqlite.Error as e:
        raise store_error("get_employee_count", e) from e
    return row["count"]


async def search_employees(db: aiosqlite.Connection, query: str) -> List[Dict[str, Any]]:
    """Match `query` as a substring of firstname, lastname, email or department name.

    LIKE wildcards inside `query` are matched literally.
    """
    sql = f"""
        {EMPLOYEE_SELECT}
        WHERE employees.firstname LIKE ? ESCAPE '\\'
           OR employees.lastname LIKE ? ESCAPE '\\'
           OR employees.email LIKE ? ESCAPE '\\'
           OR departments.name LIKE ? ESCAPE '\\'
        ORDER BY employees.id DESC
    """
    pattern = f"%{escape_like(query)}%"
    try:
        async with db.execute(sql, (pattern,) * 4) as cursor:
            rows = await cursor.fetchall()
    except aiosqlite.Error as e:
        raise store_error("search_employees", e) from e
    return [dict(row) for row in rows]
