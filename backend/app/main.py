"""
FastAPI entrypoint for TaskDesk backend application.

Tables are not created here; run `python -m app.db.init_db` from `backend/`
once against a fresh database (it also seeds FIRST_ADMIN_USERNAME).
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging_setup import setup_logging
from app.api.router import api_router

setup_logging(settings.LOG_LEVEL, debug=settings.DEBUG)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="TaskDesk API",
    description="Backend API for team task tracking",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")

logger.info(f"{settings.APP_NAME} API initialized")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "TaskDesk API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
