from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

import sentry_sdk
from fastapi import FastAPI, Request, Response
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from api import models  # noqa: F401
from api.database import db, db_context
from api.endpoints import ROUTERS
from api.exceptions.api_exception import APIException, api_exception_handler
from api.logger import get_logger
from api.settings import settings


logger = get_logger(__name__)


def setup_sentry() -> None:
    if not settings.sentry_dsn:
        return

    logger.debug("initializing sentry")
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment,
        integrations=[StarletteIntegration(), FastApiIntegration(), SqlalchemyIntegration()],
    )


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    setup_sentry()

    if settings.debug:
        logger.warning("creating database tables, use alembic migrations outside of debug mode")
        await db.create_tables()

    logger.info("webinars service started")
    yield
    await db.engine.dispose()
    logger.info("webinars service stopped")


app = FastAPI(title="Webinars", root_path=settings.root_path, debug=settings.debug, lifespan=lifespan)
for router in ROUTERS:
    app.include_router(router)

app.add_exception_handler(APIException, api_exception_handler)  # type: ignore


@app.middleware("http")
async def db_session(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    async with db_context():
        return await call_next(request)
