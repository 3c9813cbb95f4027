"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .appointments.router import router as appointments_router
from .auth.router import router as auth_router
from .config import get_settings
from .core.bootstrap import bootstrap_admin_if_needed, create_tables, seed_roles
from .core.middleware import setup_middlewares
from .database import get_db, get_engine, get_session_factory
from .exceptions import register_exception_handlers
from .pets.router import router as pets_router
from .users.router import router as users_router
from .veterinarians.router import router as veterinarians_router

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Prepare storage before serving: tables, default roles, first admin.
    """
    logger.info("Starting Veterinary Clinic API...")
    try:
        create_tables(get_engine())
        db = get_session_factory()()
        try:
            seed_roles(db)
            bootstrap_admin_if_needed(db, settings)
        finally:
            db.close()
    except Exception as e:
        logger.error(f"Bootstrap process failed: {e}")
    yield


# Create FastAPI application
app = FastAPI(
    title="Veterinary Clinic API",
    description="API for the veterinary clinic: accounts, veterinarians, pets and appointments",
    version="1.0.0",
    lifespan=lifespan,
)

# Register exception handlers
register_exception_handlers(app)

# Setup custom middleware
setup_middlewares(app, settings.cors_origins)

# Include routers
app.include_router(auth_router, prefix="/api/auth", tags=["Authentication"])
app.include_router(users_router, prefix="/api", tags=["Users"])
app.include_router(veterinarians_router, prefix="/api", tags=["Veterinarians"])
app.include_router(pets_router, prefix="/api", tags=["Pets"])
app.include_router(appointments_router, prefix="/api", tags=["Appointments"])


# Root endpoint
@app.get("/")
def root():
    """
    Root endpoint.

    Returns:
        dict: Simple welcome message
    """
    return {"message": "Welcome to Veterinary Clinic API", "version": app.version}


# Health check endpoint
@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint for monitoring.

    Returns:
        dict: Health status information
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": "disconnected"},
        )
    return {"status": "healthy", "database": "connected"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("vetclinic.main:app", host="0.0.0.0", port=settings.port)
