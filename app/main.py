import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from .api.api import api_router
from .config import settings
from .utils.file_handler import UPLOAD_URL_PREFIX

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Methods an HTML form may request through ?_method=
OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}

# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG
)


@app.middleware("http")
async def method_override(request: Request, call_next):
    """Dispatch `POST ...?_method=DELETE` (and PUT/PATCH) as that method."""
    if request.method == "POST":
        override = request.query_params.get("_method", "").upper()
        if override in OVERRIDABLE_METHODS:
            request.scope["method"] = override
    return await call_next(request)


@app.exception_handler(SQLAlchemyError)
async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Sunucu hatası"},
    )


# Uploaded post images
Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

app.include_router(api_router)


# Health check endpoint
@app.get("/health")
def health_check():
    """API health check"""
    return {"status": "healthy"}
