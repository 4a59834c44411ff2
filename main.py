from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from loguru import logger
from framework.config import settings
from framework.database.mysql_driver import MySQLDriver
from framework.middleware.logging_md import LoggingMiddleware
from framework.logging.logger import LogConfig
from framework.exceptions.handler import StorageError, global_exception_handler
from apps.context import AppContext, BACKEND_MYSQL, build_context
from apps.breeder.api.router import router as breeder_router
from apps.cat.api.router import router as cat_router
from apps.dog.api.router import router as dog_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the app context from settings unless one was injected."""
    if getattr(app.state, "context", None) is not None:
        yield
        return

    driver = None
    if settings.REPOSITORY_BACKEND == BACKEND_MYSQL:
        driver = MySQLDriver.from_settings(settings)
        await driver.connect()
    app.state.context = build_context(
        settings.REPOSITORY_BACKEND, timeout=settings.DB_QUERY_TIMEOUT, driver=driver
    )
    logger.info(f"{settings.APP_NAME} started with {settings.REPOSITORY_BACKEND} repositories")
    try:
        yield
    finally:
        if driver is not None:
            await driver.disconnect()
        app.state.context = None


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.context = context

    # Initialize logging configuration
    LogConfig.setup_logging()

    # Register global exception handlers
    app.add_exception_handler(StorageError, global_exception_handler)
    app.add_exception_handler(RequestValidationError, global_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.add_middleware(LoggingMiddleware)

    app.include_router(dog_router, prefix=settings.API_PREFIX, tags=["Dogs"])
    app.include_router(cat_router, prefix=settings.API_PREFIX, tags=["Cats"])
    app.include_router(breeder_router, prefix=settings.API_PREFIX, tags=["Breeders"])
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=4000)
