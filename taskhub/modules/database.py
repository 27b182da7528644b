"""
Database Connection Manager

Handles database connection lifecycle and schema creation.
"""
import logging
import sqlite3
import asyncpg
from databases import Database
from fastapi import Request
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.schema import CreateIndex, CreateTable
from taskhub.modules.schema import metadata

logger = logging.getLogger("taskhub.database.connection")

# Constraint violations surfaced by the supported drivers
INTEGRITY_ERRORS = (
    sqlite3.IntegrityError,
    asyncpg.exceptions.IntegrityConstraintViolationError,
)


class ConnectionManager:
    """
    Manages database connection lifecycle.
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("database_url must be provided")
        self.database_url = database_url
        self._database = Database(database_url)

    @property
    def database(self) -> Database:
        return self._database

    async def connect(self) -> None:
        """
        Establish database connection.
        """
        if not self._database.is_connected:
            await self._database.connect()
            logger.info(f"Database connection established ({self._database.url.dialect})")

    async def disconnect(self) -> None:
        """
        Close database connection.
        """
        if self._database.is_connected:
            await self._database.disconnect()
            logger.info("Database connection closed")


def _dialect_for(database: Database):
    if database.url.dialect == "postgresql":
        return postgresql.dialect()
    return sqlite.dialect()


async def init_db(database: Database) -> None:
    """Create the Users and Tasks tables (and their indexes) if missing."""
    dialect = _dialect_for(database)
    for table in metadata.sorted_tables:
        ddl = CreateTable(table, if_not_exists=True)
        await database.execute(query=str(ddl.compile(dialect=dialect)))
        for index in table.indexes:
            ddl = CreateIndex(index, if_not_exists=True)
            await database.execute(query=str(ddl.compile(dialect=dialect)))
    logger.info("Database schema ready")


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the app's Database."""
    return request.app.state.connection_manager.database
