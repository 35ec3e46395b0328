import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware
import uvicorn

from src.core.config import settings
from src.core.database import create_tables
from src.core.exceptions import UnauthorizedException
from src.core.logging import setup_logging
from src.core.response.handlers import (
    global_exception_handler,
    unauthorized_exception_handler,
)

# Import routers from apps
from src.apps.accounts import auth_router
from src.apps.blog import admin_router, post_router

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Create database tables
    await create_tables()
    logger.info("Database ready at %s", settings.ASYNC_DATABASE_URL)
    yield
    logger.info("Shutting down")


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_INFO,
    version=settings.PROJECT_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Adjust in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(UnauthorizedException, unauthorized_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, global_exception_handler)


# Health check endpoint
@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with health check."""
    return {"message": "Server is running", "status": "healthy", "version": settings.PROJECT_VERSION}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "message": "Service is running normally"}


# Include app routers
# Admin routes first: /posts/admin must not be captured by /posts/{slug}
app.include_router(auth_router)
app.include_router(admin_router)
app.include_router(post_router)


if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload in development
        log_level="info",
    )
