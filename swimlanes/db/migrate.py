import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"


def alembic_config() -> Config:
    """Alembic config pointing at the packaged migration scripts, no ini file needed."""
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    return config


def _upgrade(connection, config: Config, revision: str):
    # env.py picks the shared connection up instead of opening its own engine
    config.attributes["connection"] = connection
    command.upgrade(config, revision)


async def run_migrations(engine: AsyncEngine, revision: str = "head"):
    """Upgrade the database behind ``engine`` to ``revision``."""
    logger.info(f"Applying migrations up to {revision}")
    async with engine.begin() as conn:
        await conn.run_sync(_upgrade, alembic_config(), revision)
    logger.info("Migrations applied")
