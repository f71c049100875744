"""FastAPI application: wires settings, logging, the session store and the routes together."""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from src.api.routes import router
from src.core.config import Settings, get_settings
from src.db.memory_repository import InMemoryGameRepository
from src.services.connect_four_service import ConnectFourService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title="Connect Four")
    app.state.service = ConnectFourService(InMemoryGameRepository(), settings)
    app.include_router(router)

    logger.info(
        "Connect Four ready: %sx%s board", settings.board_height, settings.board_width
    )
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app)
