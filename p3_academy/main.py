import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from sqlalchemy.exc import SQLAlchemyError

import p3_academy.models  # noqa: F401  registers tables on Base.metadata
from p3_academy.api.routes import router as api_router
from p3_academy.core.config import settings
from p3_academy.db.session import Base, engine
from p3_academy.services.ai_router import AIServiceUnavailable
from p3_academy.services.session_management import session_manager

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up the application...")
    Base.metadata.create_all(bind=engine)
    logger.info(f"CORS origins: {settings.CORS_ORIGINS}")

    cleanup_task = None
    if settings.SESSION_CLEANUP_ENABLED:
        cleanup_task = asyncio.create_task(session_manager.run_periodic_cleanup())

    yield

    logger.info("Shutting down the application...")
    if cleanup_task is not None:
        cleanup_task.cancel()
        try:
            await cleanup_task
        except asyncio.CancelledError:
            logger.info("Session cleanup task stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="P3 Interview Academy - Prepare, Practice and Perform mock interviews",
    version=settings.VERSION,
    lifespan=lifespan,
)

origins = settings.CORS_ORIGINS if isinstance(settings.CORS_ORIGINS, list) else ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AIServiceUnavailable)
async def ai_unavailable_handler(request: Request, exc: AIServiceUnavailable):
    logger.error(f"AI services unavailable for {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "code": status.HTTP_503_SERVICE_UNAVAILABLE,
            "message": "AI services are temporarily unavailable",
            "data": None,
            "errors": {"ai": str(exc)},
            "meta": None,
        },
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "message": "Database error",
            "data": None,
            "errors": {"database": exc.__class__.__name__},
            "meta": None,
        },
    )


metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.VERSION}


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=f"{settings.PROJECT_NAME} API",
        version=settings.VERSION,
        description="Interview preparation API for Southeast Asian job seekers",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("p3_academy.main:app", host="0.0.0.0", port=8000, reload=True)
