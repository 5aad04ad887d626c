import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from skillmatch.core.config import settings
from skillmatch.core.errors import ServiceError
from skillmatch.config.constants import API_TITLE, API_VERSION
from skillmatch.db.session import create_engine, create_session_factory
from skillmatch.infrastructure.clients.supabase_auth import SupabaseAuthClient
from skillmatch.api.matches import router as matches_router
from skillmatch.api.skills import router as skills_router
from skillmatch.api.feedbacks import router as feedbacks_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up FastAPI...")
    engine = create_engine(settings)
    app.state.session_factory = create_session_factory(engine)
    app.state.auth_client = SupabaseAuthClient(
        settings.SUPABASE_URL,
        settings.SUPABASE_SERVICE_ROLE,
        timeout_seconds=settings.AUTH_TIMEOUT_SECONDS,
    )
    yield
    logger.info("Shutting down FastAPI...")
    await engine.dispose()


app = FastAPI(
    title=API_TITLE,
    docs_url="/docs" if settings.is_dev_mode else None,
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ========================
# Error mapping
# ========================

@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "invalid request") if errors else "invalid request"
    logger.info(f"{request.method} {request.url.path} -> 400: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": str(exc) or exc.__class__.__name__})


# Include routers
app.include_router(matches_router)
app.include_router(skills_router)
app.include_router(feedbacks_router)


@app.get("/health")
async def health_check():
    return {"ok": True}


@app.get("/")
async def root():
    return {"message": API_TITLE, "version": API_VERSION}
