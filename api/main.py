"""FastAPI application entry point."""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from advisor.cards import RANKS
from advisor.errors import AdvisorError
from advisor.strategy.rules import BASELINE_RULES
from api.routes import advice, table
from config import config

logging.basicConfig(level=config.logging.level, format=config.logging.format)
logger = logging.getLogger(__name__)

limiter = Limiter(
    key_func=get_remote_address,
    enabled=config.rate_limit.enabled,
    default_limits=[f"{config.rate_limit.requests_per_minute}/minute"],
)


def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded errors."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


def _advisor_error_handler(request: Request, exc: AdvisorError) -> JSONResponse:
    """Bad ranks and over-full shoes are client errors."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


app = FastAPI(
    title="Blackjack Count Advisor",
    description="Hi-Lo count tracking with basic strategy and index plays",
    version="0.1.0",
    debug=config.debug,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(AdvisorError, _advisor_error_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.allow_methods,
    allow_headers=config.cors.allow_headers,
)


@app.get("/api/health")
@limiter.limit(f"{config.rate_limit.requests_per_minute}/minute")
async def health_check(request: Request) -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/api/rules")
async def table_rules() -> dict[str, list[str]]:
    """Rule badges and the rank picker order."""
    return {
        "badges": BASELINE_RULES.badges(),
        "ranks": [str(rank) for rank in RANKS],
    }


app.include_router(table.router, prefix="/api/table", tags=["table"])
app.include_router(advice.router, prefix="/api/advice", tags=["advice"])


def run() -> None:
    """Serve the API with uvicorn."""
    uvicorn.run("api.main:app", host=config.host, port=config.port, reload=config.debug)
