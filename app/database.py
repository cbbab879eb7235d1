# app/database.py
import logging

import aiosqlite

from app.config import get_settings
from app.models import TABLES

settings = get_settings()
logger = logging.getLogger(__name__)

class Database:
    connection: aiosqlite.Connection = None

db = Database()

async def open_connection(path: str) -> aiosqlite.Connection:
    """Open a connection in autocommit mode.

    The connection is shared by concurrent requests, so each write statement
    commits on its own instead of joining a connection-wide transaction that
    another request could commit or roll back.
    """
    conn = await aiosqlite.connect(path, isolation_level=None)
    conn.row_factory = aiosqlite.Row
    return conn

async def connect_to_db():
    db.connection = await open_connection(settings.DATABASE_PATH)
    logger.info("Connected to database: %s", settings.DATABASE_PATH)

async def close_db_connection():
    if db.connection:
        await db.connection.close()
        db.connection = None
        logger.info("Closed database connection")

async def get_database():
    return db.connection

async def create_tables(conn: aiosqlite.Connection):
    """Create every table if it does not already exist. Safe to run repeatedly."""
    for ddl in TABLES:
        await conn.execute(ddl)

async def init_db():
    if not db.connection:
        await connect_to_db()
    try:
        await create_tables(db.connection)
        logger.info("Tables created or already exist")
    except aiosqlite.Error as e:
        logger.error("Database initialization failed: %s", e)
        raise

async def insert_sample_data():
    if not db.connection:
        await connect_to_db()
    conn = db.connection
    try:
        # Check if data already exists
        async with conn.execute("SELECT COUNT(*) FROM employees") as cursor:
            (count,) = await cursor.fetchone()
        if count > 0:
            logger.info("Sample data already exists. Skipping insertion.")
            return

        await conn.execute("BEGIN")
        departments = [("Sales",), ("Marketing",), ("IT",)]
        await conn.executemany(
            "INSERT OR IGNORE INTO departments (name) VALUES (?)", departments
        )

        users = [("admin", "admin@example.com")]
        await conn.executemany(
            "INSERT OR IGNORE INTO users (username, email) VALUES (?, ?)", users
        )

        employees = [
            ("John", "Doe", "john.doe@example.com", "555-0100", "Sales"),
            ("Jane", "Smith", "jane.smith@example.com", "555-0101", "Marketing"),
            ("Bob", "Johnson", "bob.johnson@example.com", None, "IT"),
        ]
        await conn.executemany(
            """
            INSERT INTO employees (firstname, lastname, email, phone, department_id)
            VALUES (?, ?, ?, ?, (SELECT id FROM departments WHERE name = ?))
            """,
            employees,
        )
        await conn.commit()
        logger.info("Sample data inserted successfully!")
    except aiosqlite.Error as e:
        await conn.rollback()
        logger.error("Failed to insert sample data: %s", e)
        raise
