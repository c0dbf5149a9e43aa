"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roadrisk import __version__
from roadrisk.api.routes import zones
from roadrisk.core.config import settings
from roadrisk.core.errors import ConfigurationError
from roadrisk.core.logging import setup_logging

logger = logging.getLogger("roadrisk.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown logic.
    """
    setup_logging()
    logger.info("Starting RoadRisk API...")
    yield
    logger.info("Shutting down RoadRisk API...")


app = FastAPI(
    title="RoadRisk",
    description="Road accident zone risk classification API",
    version=__version__,
    lifespan=lifespan,
)

# CORS Configuration
# Allow all for development convenience
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    zones.router,
    prefix="/api/v1",
    tags=["zones"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "roadrisk",
    }


@app.get("/ready")
async def readiness_check():
    """Readiness probe: the zone catalog must load."""
    try:
        engine = zones.get_engine()
    except ConfigurationError as e:
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "code": e.code, "error": e.message},
        )
    return {"status": "ready", "zones": len(engine.catalog)}


def main():
    """Entry point for the application."""
    import uvicorn
    uvicorn.run("roadrisk.api.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)


if __name__ == "__main__":
    main()
