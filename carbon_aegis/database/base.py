"""
Database engine configuration.

Builds the async engine and session maker for PostgreSQL (asyncpg) or, in the
test environment, SQLite (aiosqlite). Also provides database creation and
alembic migration helpers.
"""
import asyncio
import contextlib
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as alembic_config
from sqlalchemy import text
from sqlalchemy.engine.url import URL
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from carbon_aegis.core.config import Config

DEFAULT_DRIVERNAME = "postgresql+asyncpg"

engine_kw = {
    "pool_pre_ping": True,
    # emits the equivalent of "SELECT 1" each time a connection is checked out
    "pool_size": 2,  # connections kept open
    "max_overflow": 4,  # connections allowed above pool_size
    "connect_args": {
        "prepared_statement_cache_size": 0,
        "statement_cache_size": 0,
    },
}

sqlite_engine_kw = {
    "connect_args": {"check_same_thread": False},
}


def get_db_url(config: Config) -> URL:
    """
    Construct database URL from config.

    The optional ``drivername`` key selects the driver; PostgreSQL over asyncpg
    is the default.
    """
    config_db = dict(config.data["db"])
    drivername = config_db.pop("drivername", DEFAULT_DRIVERNAME)
    return URL.create(drivername=drivername, **config_db)


def get_engine_kw(async_db_url: URL) -> dict:
    """Engine keyword arguments suited to the URL's backend."""
    if async_db_url.get_backend_name() == "sqlite":
        return dict(sqlite_engine_kw)
    return dict(engine_kw)


def get_async_engine(async_db_url: URL, **kwargs) -> AsyncEngine:
    """
    Create async database engine.
    """
    options = get_engine_kw(async_db_url)
    options.update(kwargs)
    if async_db_url.get_backend_name() != "sqlite":
        options.setdefault("pool_recycle", 3600)
        options.setdefault("pool_timeout", 30)
    return create_async_engine(async_db_url, **options)


async def create_database(config: Config) -> bool:
    """
    Ensures the PostgreSQL database named in the config exists.

    Connects to the 'postgres' maintenance database to issue CREATE DATABASE.
    SQLite databases are created on first connect, so nothing is done for them.

    Returns:
        True if the database was newly created, False if it already existed.

    Raises:
        ValueError: If the database name is missing in the configuration.
    """
    db_params = dict(config.data["db"])
    drivername = db_params.pop("drivername", DEFAULT_DRIVERNAME)
    if drivername.startswith("sqlite"):
        logging.info("SQLite database, skipping CREATE DATABASE")
        return False

    target_database_name = db_params.pop("database", None)
    if not target_database_name:
        logging.error("Database name not found in configuration for creation.")
        raise ValueError("Database name missing in configuration for creation.")

    if "user" in db_params and "username" not in db_params:
        db_params["username"] = db_params.pop("user")

    maintenance_url = URL.create(
        drivername=drivername, **{**db_params, "database": "postgres"}
    )
    maintenance_engine = get_async_engine(maintenance_url)
    try:
        logging.info(
            f"Attempting to create database '{target_database_name}' in {db_params.get('host')} if it does not exist."
        )
        async with maintenance_engine.connect() as connection:
            # CREATE DATABASE cannot run inside a transaction block
            autocommit_connection = await connection.execution_options(
                isolation_level="AUTOCOMMIT"
            )
            await autocommit_connection.execute(
                text(f'CREATE DATABASE "{target_database_name}"')
            )
        logging.info(f"Database '{target_database_name}' created successfully.")
        return True
    except DBAPIError as e:
        # 42P04: duplicate_database
        with contextlib.suppress(AttributeError):
            if getattr(e.orig, "pgcode", None) == "42P04" or "already exists" in str(e.orig):
                logging.warning(
                    f"Database '{target_database_name}' already exists. No action taken."
                )
                return False

        logging.error(
            f"A DBAPIError occurred while trying to create database '{target_database_name}': {e}"
        )
        raise
    finally:
        await maintenance_engine.dispose()


async def apply_db_migration(config: Config):
    """
    Create the database if needed and upgrade it to the latest alembic revision.

    Blocks until all migrations are complete.
    """
    await create_database(config)

    alembic_cfg = alembic_config(str(Path.cwd() / "alembic.ini"))
    alembic_cfg.set_main_option(
        "script_location", str(Path.cwd() / "alembic_migrations")
    )
    alembic_cfg.set_main_option(
        "sqlalchemy.url",
        get_db_url(config).render_as_string(hide_password=False).replace("%", "%%"),
    )

    # env.py drives the async engine itself, so the upgrade runs in a worker thread
    logging.info("Starting database migrations...")
    await asyncio.to_thread(command.upgrade, alembic_cfg, "head")
    logging.info("Database migration completed successfully")
