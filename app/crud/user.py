# app/crud/user.py
import logging
from typing import Any, Dict, List

import aiosqlite

from app.errors import store_error

logger = logging.getLogger(__name__)


async def get_users(db: aiosqlite.Connection) -> List[Dict[str, Any]]:
    try:
        async with db.execute("SELECT * FROM users ORDER BY id DESC") as cursor:
            rows = await cursor.fetchall()
    except aiosqlite.Error as e:
        raise store_error("get_users", e) from e
    return [dict(row) for row in rows]


async def add_user(db: aiosqlite.Connection, username: str, email: str) -> int:
    try:
        async with db.execute(
            "INSERT INTO users (username, email) VALUES (?, ?)", (username, email)
        ) as cursor:
            new_id = cursor.lastrowid
    except aiosqlite.Error as e:
        raise store_error("add_user", e) from e
    logger.info("User %r saved to %s", username, new_id)
    return new_id


async def get_user_count(db: aiosqlite.Connection) -> int:
    try:
        async with db.execute("SELECT COUNT(*) AS count FROM users") as cursor:
            row = await cursor.fetchone()
    except aiosqlite.Error as e:
        raise store_error("get_user_count", e) from e
    return row["count"]
