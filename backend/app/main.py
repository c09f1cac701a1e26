"""
Truck Fault Tracker FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import trucks, vin
from app.config import settings

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    logger.info("Starting Truck Fault Tracker API...")
    yield
    logger.info("Shutting down Truck Fault Tracker API...")


# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    debug=settings.debug,
    lifespan=lifespan,
)

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(vin.router)
app.include_router(trucks.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Truck Fault Tracker API",
        "version": settings.api_version,
        "endpoints": {
            "decode": "/vin/decode?vin=...",
            "validate": "/vin/validate?vin=...",
            "autofill": "/vin/autofill",
            "sample_vin": "/vin/sample",
            "manufacturers": "/trucks/manufacturers",
            "models": "/trucks/models?manufacturer=...",
            "sample_truck": "/trucks/sample",
            "odometer": "/trucks/odometer?reading=...&unit=MILES&to=KILOMETERS",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
