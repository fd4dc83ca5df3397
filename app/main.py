import logging

import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware

from app.api import summary, transactions
from app.core import config
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.store import store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if config.SEED_DATA:
        store.seed()
    yield  # Nada que limpiar: los datos viven solo en memoria


app = FastAPI(title="Finance Tracker API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=config.CORS_ALLOW_METHODS,
    allow_headers=config.CORS_ALLOW_HEADERS,
    expose_headers=config.CORS_EXPOSE_HEADERS,
    max_age=config.CORS_MAX_AGE,
)

register_exception_handlers(app)

app.include_router(transactions.router)
app.include_router(summary.router)


@app.get("/")
def root():
    return {"message": "Finance tracker API is running"}


def run():
    configure_logging()
    logger.info("Starting server on %s:%d", config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
