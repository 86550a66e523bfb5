from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING
from os import PathLike, environ
from pathlib import Path
from tomllib import load

from pydantic import BaseModel, field_validator

DEFAULT_CONFIG_PATH = Path(environ.get("DICTIONARY_CONFIG", "config.toml"))


class General(BaseModel):
    title: str


class Database(BaseModel):
    path: str = "sqlite:///dictionaries.db"


class Logging(BaseModel):
    level: int = INFO

    @field_validator("level", mode="before")
    @classmethod
    def convert_log_level(cls, value):
        if isinstance(value, int):
            return value

        log_levels = {
            "DEBUG": DEBUG,
            "INFO": INFO,
            "WARNING": WARNING,
            "ERROR": ERROR,
            "CRITICAL": CRITICAL,
        }
        return log_levels.get(str(value).upper(), INFO)


class Paths(BaseModel):
    logs: str = "logs"


class Network(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False


class Config(BaseModel):
    general: General
    database: Database = Database()
    paths: Paths = Paths()
    logging: Logging = Logging()
    network: Network = Network()


def load_config(
    shared_config_file: PathLike = DEFAULT_CONFIG_PATH,
    specific_config_file: PathLike | None = None,
) -> Config:
    """Load and merge configurations from TOML files."""
    with Path(shared_config_file).open("rb") as f:
        config_data = load(f)

    # Specific config replaces whole top-level tables
    if specific_config_file:
        with Path(specific_config_file).open("rb") as f:
            specific_data = load(f)
            config_data.update(specific_data)

    return Config(**config_data)
