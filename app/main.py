import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.db.couchdb import connect_couch
from app.exceptions import ApiError
from app.routers import blogs, gallery
from app.services.media_host import CloudinaryClient
from app.settings import Settings, settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    current_settings = app.state.settings
    if getattr(app.state, "couch_db", None) is None:
        try:
            app.state.couch_db = connect_couch(current_settings)
        except Exception as e:
            logger.error(f"CouchDB connection error: {e}")
            raise
        logger.info(f"CouchDB connected ({current_settings.COUCHDB_DATABASE})")

    app.state.media_host = CloudinaryClient(current_settings)
    yield


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"message": "Invalid request body"})


def create_app(settings_obj: Settings = settings) -> FastAPI:
    app = FastAPI(
        title="SkyBM API",
        description="Blog posts and event gallery",
        lifespan=lifespan,
    )
    app.state.settings = settings_obj

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings_obj.CORS_ORIGINS,
        allow_methods=settings_obj.CORS_METHODS,
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/")
    def root():
        return {"status": "API is running"}

    app.include_router(gallery.router, tags=["gallery"])
    app.include_router(blogs.router, tags=["blogs"])
    return app


app = create_app()


def run() -> None:
    """Connect to CouchDB, then serve. Exits with status 1 if the database is unreachable."""
    try:
        app.state.couch_db = connect_couch(settings)
    except Exception as e:
        logger.error(f"CouchDB connection error: {e}")
        sys.exit(1)
    logger.info(f"CouchDB connected ({settings.COUCHDB_DATABASE})")

    logger.info(f"Server running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
