import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogful import config
from blogful.articles import router as articles_router
from blogful.db import init_db, wait_for_db
from blogful.errors import register_error_handlers
from blogful.logging_setup import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging(config.LOG_LEVEL)
    wait_for_db()
    init_db()
    logger.info("Blogful API started")
    yield
    logger.info("Blogful API shutting down")


def create_app(api_prefix: str = config.API_PREFIX) -> FastAPI:
    app = FastAPI(title="Blogful API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(articles_router, prefix=api_prefix)

    @app.get("/")
    def root() -> dict:
        return {"message": "Hello, world!"}

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
