from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studyaid.config import settings
from studyaid.core.exceptions import StudyAidError
from studyaid.core.logging import setup_logging, get_logger
from studyaid.core.middleware import RequestContextMiddleware
from studyaid.api.v1.router import api_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    mode = "cloud" if settings.gemini_api_key else "offline"
    logger.info(f"Starting {settings.app_name} in {mode} mode")

    yield

    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Document ingestion (PDF, OCR, plain text) and study aids: summaries, quizzes, flashcards",
    lifespan=lifespan,
)

app.add_middleware(RequestContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url, "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(StudyAidError)
async def study_aid_exception_handler(request: Request, exc: StudyAidError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "status_code": exc.status_code},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "status_code": 500},
    )


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint for load balancers and container orchestration."""
    return {"status": "healthy", "version": settings.app_version}
