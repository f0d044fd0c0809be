"""
Agentic Maintainer - FastAPI Application Entry Point
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agentic_maintainer.config import settings
from agentic_maintainer.api.v1.endpoints import audit, health
from agentic_maintainer.logger import logger

# Create app
app = FastAPI(
    title=settings.APP_NAME,
    description="Single-page site health audit with prioritized maintenance tasks",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(audit.router, prefix="/api/v1/audit")


@app.on_event("startup")
async def startup():
    """Log startup."""
    logger.info(f"Starting {settings.APP_NAME} {settings.APP_VERSION}...")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }
