# app/main.py
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.database import build_engine, make_session_factory
from app.errors import ScheduleError, ValidationError
from app.logging_config import setup_logging
from app.repositories.schedule_repository import ScheduleRepository
from app.routers import reference, schedule


setup_logging()
logger = logging.getLogger("app")

SERVICE_ERROR_MESSAGE = "Schedule service is unavailable"


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = build_engine(
        settings.database_url,
        pool_size=settings.DB_POOL_SIZE,
        pool_timeout=settings.DB_POOL_TIMEOUT,
    )
    app.state.repository = ScheduleRepository(make_session_factory(engine))
    logger.info("schedule api started (tz=%s, concurrency=%d)", settings.TIMEZONE, settings.ENRICH_CONCURRENCY)
    try:
        yield
    finally:
        engine.dispose()
        logger.info("schedule api stopped")


app = FastAPI(title="Расписание МАУ", description="API Расписание МАУ", version="1.0.0", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
        ms = int((time.time() - start) * 1000)
        logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code, ms)
        return response
    except Exception:
        ms = int((time.time() - start) * 1000)
        logger.exception("Unhandled error %s %s (%dms)", request.method, request.url.path, ms)
        raise


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    logger.warning("Bad request %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    logger.warning("Bad request %s: %s", request.url.path, exc.errors())
    # 只回參數名稱，不回 pydantic 的完整錯誤內容
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    message = f"Invalid parameter: {', '.join(fields)}" if fields else "Invalid request parameters"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(ScheduleError)
async def handle_schedule_error(request: Request, exc: ScheduleError):
    # NotFound / Integrity / TransientStore：完整內容只進 log，前端只拿到固定訊息
    logger.error(
        "%s %s failed: %s: %s path_params=%s query=%s",
        request.method,
        request.url.path,
        exc.__class__.__name__,
        exc,
        dict(request.path_params),
        dict(request.query_params),
        exc_info=exc if exc.__cause__ is not None else None,
    )
    return JSONResponse(status_code=500, content={"error": SERVICE_ERROR_MESSAGE})


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Routers
app.include_router(reference.router)
app.include_router(schedule.router)
