# genre_shelf/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .catalog.router import router as catalog_router
from .config import get_settings
from .error_handlers import register_error_handlers
from .observability import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    yield


app = FastAPI(
    title="Genre Shelf",
    description="Small book catalogue that lists books by exact genre.",
    version="1.0.0",
    lifespan=lifespan,
)
register_error_handlers(app)
app.include_router(catalog_router)


@app.get("/")
def health_check():
    """Liveness check for load balancers and uptime monitors."""
    return {"status": "ok", "message": "Genre Shelf is up"}
