"""
Main API application
"""

import sys
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from config import get_settings
from api.scoring_api import router as scoring_router
from api.quiz_api import router as quiz_router
from api.progress_api import router as progress_router

settings = get_settings()

logger.remove()
logger.add(
    sys.stderr,
    level=settings.log_level.upper(),
    format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {name}:{line} - {message}",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"CORS origins: {settings.cors_allow_origins}")

    yield

    logger.info("Shutting down server...")


app = FastAPI(
    title=settings.app_name,
    description="Scoring and progress analytics for wellness self-assessment quizzes",
    version=settings.app_version,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(scoring_router)
app.include_router(quiz_router)
app.include_router(progress_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
