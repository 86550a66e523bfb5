from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine

from app.models.schema import *  # noqa: F403 # SQLModel subclasses need to be in memory
from app.shared.config import load_config
from app.shared.logger import Logger

logger = Logger(__name__).get_logger()

config = load_config()


def init_db(engine: Engine) -> Engine:
    """Create any missing tables on the given engine."""
    SQLModel.metadata.create_all(engine)
    logger.debug("Database schema ready on %s", engine.url)
    return engine


def get_engine(database_path: str = config.database.path) -> Engine:
    return init_db(create_engine(database_path))
