"""Form Service API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FormServiceError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The store pool is created in the lifespan, owned by app.state.db, and
      disposed before the process exits

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from formservice.api.error_handlers import register_error_handlers
from formservice.api.routes import form_responses, forms, health, master_questions
from formservice.config import get_settings
from formservice.infrastructure.database import DatabaseSessionManager
from formservice.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Form service API started")
    try:
        yield
    finally:
        logger.info("Form service API shutting down")
        await app.state.db.close()


app = FastAPI(title="Form Service API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


app.include_router(health.router)
app.include_router(master_questions.router)
app.include_router(forms.router)
app.include_router(form_responses.router)

register_error_handlers(app)
