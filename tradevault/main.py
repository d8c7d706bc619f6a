"""
Main FastAPI application.

Serves cross-entity search for the TradeVault investment platform.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradevault.core.config import get_settings
from tradevault.core.database import check_connection, create_tables, get_session_factory
from tradevault.core.seed import seed_demo_catalogue
from tradevault.api.v1 import search

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Runs on startup and shutdown.
    """
    # Startup
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    logger.info("Starting TradeVault Search Service")
    logger.info(f"Log level: {settings.log_level}")

    if settings.database_enabled:
        try:
            create_tables()
            logger.info("Database tables ready")
            if settings.seed_demo_data:
                db = get_session_factory()()
                try:
                    seed_demo_catalogue(db)
                finally:
                    db.close()
        except Exception as e:
            # Search keeps working from the in-memory catalogue
            logger.error(f"Failed to prepare database, search will use fallback data: {e}")
    else:
        logger.info("No database configured, search will use fallback data")

    yield

    # Shutdown
    logger.info("Shutting down")


# Create FastAPI app
app = FastAPI(
    title="TradeVault Search Service",
    description="Search across tokenized assets, platform users and investments",
    version="0.1.0",
    lifespan=lifespan
)

# CORS middleware (configure as needed)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(search.router, prefix="/api/v1")


@app.get("/")
def root():
    """Root endpoint with service info."""
    return {
        "service": "TradeVault Search Service",
        "version": "0.1.0",
        "entities": ["asset", "user", "investment"],
        "docs": "/docs"
    }


@app.get("/health")
def health_check():
    """
    Health check endpoint.

    Returns status of the service and database connectivity. A missing
    database degrades search to fallback data but does not make the
    service unhealthy.
    """
    health_status = {
        "status": "healthy",
        "service": "running",
        "database": "not_configured"
    }

    if not get_settings().database_enabled:
        return health_status

    try:
        health_status["database"] = check_connection()
    except Exception as e:
        health_status["status"] = "degraded"
        health_status["database"] = f"error: {str(e)}"
        logger.warning(f"Database health check failed: {e}")

    return health_status
