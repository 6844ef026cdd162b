from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from coinprice import __version__
from coinprice.api.errors import install_error_handling
from coinprice.api.routes import router
from coinprice.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("startup", extra={"event": "startup", "version": __version__})
    yield


def create_app() -> FastAPI:
    """Build the price normalization app."""
    configure_logging()
    app = FastAPI(
        title="Coinbase Price Normalization API",
        version=__version__,
        lifespan=lifespan,
    )
    app.include_router(router)
    install_error_handling(app)
    return app


app = create_app()
