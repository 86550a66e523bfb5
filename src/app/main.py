from fastapi import (
    FastAPI,
)
from fastapi.middleware.cors import CORSMiddleware

from app.core import DictionaryController, DictionaryService
from app.routers import get_routers
from app.shared import Logger, load_config
from app.shared.db import get_engine
from app.shared.http import register_error_handlers

logger = Logger(__name__).get_logger()

config = load_config()


# ================================================================================
#       FastAPI Setup
# ================================================================================
def create_app(service: DictionaryService | None = None) -> FastAPI:
    if service is None:
        service = DictionaryService(get_engine())

    app = FastAPI(title=config.general.title.splitlines()[0])

    controller = DictionaryController(service)
    for router in get_routers(controller):
        app.include_router(router)

    origins = ["*"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    return app


app = create_app()


# ================================================================================
#       Command Line
# ================================================================================
def welcome():
    # Log server banner
    for line in config.general.title.split("\n"):
        logger.info(line)

    logger.info(
        "Starting dictionary server on %s:%s", config.network.host, config.network.port
    )


def main(argv=None):
    welcome()

    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=config.network.host,
        port=config.network.port,
        reload=config.network.reload,
    )


if __name__ == "__main__":
    main()
