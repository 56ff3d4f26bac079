"""
TradeQuote - Main Application Entry Point
Multi-tenant quoting backend for worktop trade suppliers
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from tradequote.api import auth, branding, quotes
from tradequote.core.config import get_settings
from tradequote.core.database import init_db
from tradequote.core.errors import register_error_handlers
from tradequote.core.logging_config import configure_logging

configure_logging()

logger = structlog.get_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting TradeQuote backend", environment=settings.ENVIRONMENT)
    if settings.DB_AUTO_CREATE:
        await init_db()

    yield

    logger.info("Shutting down TradeQuote backend")


# Create FastAPI application
app = FastAPI(
    title="TradeQuote API",
    description="Multi-tenant company registration, branding and quoting for trade suppliers",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure middleware stack
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}


api_router = APIRouter()
api_router.add_api_route("/health", health_check, methods=["GET"], tags=["health"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(branding.router, tags=["branding"])
api_router.include_router(quotes.router, prefix="/quotes", tags=["quotes"])

app.include_router(api_router, prefix=settings.API_PREFIX)
app.add_api_route("/health", health_check, methods=["GET"], tags=["health"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "tradequote.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level="info",
    )
