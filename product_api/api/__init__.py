# product_api/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from product_api.api.responses import install_error_handlers
from product_api.api.routers import health, products
from product_api.data.database import create_db_engine, create_session_factory, init_db
from product_api.utils.logging import get_logger
from product_api.utils.settings import DATABASE_URL, DB_CONNECT_ATTEMPTS

logger = get_logger(__name__)


def create_app(database_url: str | None = None, connect_attempts: int | None = None) -> FastAPI:
    engine = create_db_engine(database_url or DATABASE_URL)
    attempts = connect_attempts or DB_CONNECT_ATTEMPTS

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # brak bazy przy starcie = aplikacja nie wstaje
        await run_in_threadpool(init_db, engine, attempts)
        logger.info("Product service started")
        yield
        engine.dispose()

    app = FastAPI(
        title="Product Service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    install_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)

    return app
