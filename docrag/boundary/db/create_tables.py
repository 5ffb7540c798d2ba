"""
Database table creation script.

Enables the pgvector extension and creates all tables and indexes
defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, docrag.boundary.db
System role: Database schema initialization

Usage:
    python -m docrag.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from docrag.boundary.db.base import Base
from docrag.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from docrag.boundary.db.models.chunk_model import ChunkModel  # noqa: F401
from docrag.boundary.db.models.document_model import DocumentModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create the vector extension, the documents/chunks tables and indexes.

    Idempotent: CREATE EXTENSION IF NOT EXISTS plus CREATE TABLE IF NOT
    EXISTS for each model, so safe to run multiple times.

    Args:
        engine: Engine to use (a new one is created and disposed if None)

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    owns_engine = engine is None
    engine = engine or get_async_engine()
    try:
        async with engine.begin() as conn:
            if conn.dialect.name == "postgresql":
                await conn.execute(text("CREATE EXTENSION IF NOT EXISTS vector"))
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"{__name__}:create_all_tables - Tables created successfully")
    finally:
        if owns_engine:
            await engine.dispose()


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Engine to use (a new one is created and disposed if None)
    """
    owns_engine = engine is None
    engine = engine or get_async_engine()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info(f"{__name__}:drop_all_tables - Tables dropped")
    finally:
        if owns_engine:
            await engine.dispose()


if __name__ == "__main__":
    asyncio.run(create_all_tables())
