"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from globeassist.api.limiter import limiter
from globeassist.config import settings

ALLOWED_ORIGINS = settings.cors_origins.split(",")

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and report which integrations are enabled."""
    logging.basicConfig(level=settings.log_level)
    if not (settings.serper_api_key and settings.openrouter_api_key):
        logger.warning("SERPER/OPENROUTER API keys not set, apply links will use the fallback search")
    if not settings.chat_api_key:
        logger.warning("Chat API key not set, chat assistant will send the fallback reply")
    yield


app = FastAPI(
    title="GlobeAssist API",
    description="Apply-link discovery and chat assistant for studying and working abroad",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with a clear message when rate limit is exceeded."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


# Import and include routers
from globeassist.api.routes import chat, jobs  # noqa: E402

app.include_router(jobs.router, prefix="/api/professional-jobs", tags=["Jobs"])
app.include_router(chat.router, prefix="/api/chat", tags=["Chat"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
