# privachat/services/database_service.py
"""
Database service
Async SQLAlchemy engine, sessions and dialect-specific upserts
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Dict, Optional

from sqlalchemy import Table, event
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from privachat.config import settings
from privachat.exceptions import StorageUnavailable
from privachat.models import Base
from privachat.utils.logger import logger

SQLITE_BUSY_TIMEOUT_MS = 30000


class DatabaseService:
    def __init__(self, database_url: Optional[str] = None, echo: Optional[bool] = None):
        self.database_url = database_url or settings.database_url
        echo = settings.database_echo if echo is None else echo

        if self.database_url.startswith("sqlite"):
            self.engine = create_async_engine(
                self.database_url,
                echo=echo,
                connect_args={"timeout": SQLITE_BUSY_TIMEOUT_MS / 1000},
            )
            event.listen(self.engine.sync_engine, "connect", _set_sqlite_pragma)
        else:
            self.engine = create_async_engine(self.database_url, echo=echo, pool_pre_ping=True, pool_recycle=3600)

        self.async_session = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)
        logger.info(f"DatabaseService initialised ({self.dialect_name})")

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    async def create_tables(self):
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables ready")
        except SQLAlchemyError as e:
            logger.error(f"Table creation failed: {e}")
            raise StorageUnavailable("Table creation failed") from e

    @asynccontextmanager
    async def transaction(self, action: str) -> AsyncIterator[AsyncSession]:
        """Session inside BEGIN/COMMIT. Database errors surface as StorageUnavailable."""
        try:
            async with self.async_session() as session:
                async with session.begin():
                    yield session
        except SQLAlchemyError as e:
            logger.error(f"{action} failed: {e}")
            raise StorageUnavailable(f"{action} failed") from e

    def upsert(self, table: Table, values: Dict, update: Callable[[object], Dict]):
        return build_upsert(self.dialect_name, table, values, update)

    async def close(self):
        await self.engine.dispose()
        logger.info("Database connections closed")


def _set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS}")
    cursor.close()


def build_upsert(dialect_name: str, table: Table, values: Dict, update: Callable[[object], Dict]):
    """
    Build a single INSERT .. ON CONFLICT (sqlite) / ON DUPLICATE KEY (mysql) statement.

    `update` receives the dialect's "proposed row" namespace (excluded/inserted)
    and returns the SET mapping applied when the primary key already exists.
    An empty mapping leaves the existing row untouched.
    """
    if dialect_name == "mysql":
        stmt = mysql_insert(table).values(**values)
        set_ = update(stmt.inserted)
        if not set_:
            # no-op assignment keeps the existing row
            set_ = {col.name: col for col in table.primary_key.columns}
        return stmt.on_duplicate_key_update(**set_)

    if dialect_name != "sqlite":
        raise ValueError(f"Unsupported database dialect: {dialect_name}")

    stmt = sqlite_insert(table).values(**values)
    index_elements = list(table.primary_key.columns)
    set_ = update(stmt.excluded)
    if not set_:
        return stmt.on_conflict_do_nothing(index_elements=index_elements)
    return stmt.on_conflict_do_update(index_elements=index_elements, set_=set_)
