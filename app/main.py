from pathlib import Path
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from contextlib import asynccontextmanager

from app.api.v1.routes.cities import router as cities_router
from app.api.v1.routes.health import router as health_router
from app.config import settings
from app.core.database_init import initialize_database
from app.core.error_handlers import register_error_handlers

logger = logging.getLogger(__name__)

# Setup Jinja2 templates
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info("Starting up application...")

    if settings.USE_DB_REPOS:
        # App still starts; requests will surface StorageError until the DB is reachable
        if not initialize_database():
            logger.error("Database initialization failed")

    yield

    logger.info("Shutting down application...")


def create_app() -> FastAPI:
    """Create FastAPI application and include routers."""
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title="Cities Service",
        version="0.1.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(cities_router, prefix=settings.cities_base_path)
    app.include_router(health_router)

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def index(request: Request):
        """Landing page pointing at the city collection."""
        return templates.TemplateResponse(
            request,
            "index.html",
            {"message": settings.INDEX_MESSAGE, "cities_path": settings.cities_base_path},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
    )
