# app/crud/department.py
import logging
from typing import Any, Dict, List

import aiosqlite

from app.errors import store_error

logger = logging.getLogger(__name__)


async def get_departments(db: aiosqlite.Connection) -> List[Dict[str, Any]]:
    try:
        async with db.execute("SELECT * FROM departments ORDER BY name") as cursor:
            rows = await cursor.fetchall()
    except aiosqlite.Error as e:
        raise store_error("get_departments", e) from e
    return [dict(row) for row in rows]


async def add_department(db: aiosqlite.Connection, name: str) -> int:
    try:
        async with db.execute("INSERT INTO departments (name) VALUES (?)", (name,)) as cursor:
            new_id = cursor.lastrowid
    except aiosqlite.Error as e:
        raise store_error("add_department", e) from e
    logger.info("Department %r saved to %s", name, new_id)
    return new_id


async def get_department_count(db: aiosqlite.Connection) -> int:
    try:
        async with db.execute("SELECT COUNT(*) AS count FROM departments") as cursor:
            row = await cursor.fetchone()
    except aiosqlite.Error as e:
        raise store_error("get_department_count", e) from e
    return row["count"]
