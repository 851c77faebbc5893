import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_api.api.router import api_router
from student_api.core.config import Settings, get_settings
from student_api.core.context import AppContext
from student_api.core.handlers import register_exception_handlers
from student_api.core.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Resources (connection pool, outbound HTTP client) are created when the
    app starts and released when it stops; handlers reach them through
    `app.state.context`.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.context = await AppContext.create(settings, http_client=http_client)
        logger.info(f"{settings.PROJECT_NAME} started")
        try:
            yield
        finally:
            await app.state.context.aclose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.APP_VERSION,
        description=settings.DESCRIPTION,
        debug=settings.DEBUG,
        docs_url=settings.DOCS_URL,
        redoc_url=None,
        lifespan=lifespan,
    )

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.BACKEND_CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(api_router)
    return app


def run():
    import uvicorn

    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
