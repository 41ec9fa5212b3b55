from contextlib import asynccontextmanager
import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core import config
from app.core.errors import CRMError
from app.db.redis_client import close_redis
from app.db.session import close_engine, init_models
from app.routers import (
    appointments,
    auth,
    client_documents,
    client_property_interests,
    clients,
    communication_logs,
    properties,
    user_settings,
    users,
)

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    yield
    await close_redis()
    await close_engine()


app = FastAPI(
    title="EstateHub CRM",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Register Routers ---
app.include_router(auth.router)                       # /api/auth/*
app.include_router(users.router)                      # /api/users/*
app.include_router(clients.router)                    # /api/clients/*
app.include_router(client_property_interests.router)  # /api/client-property-interests/*
app.include_router(properties.router)                 # /api/properties/*
app.include_router(appointments.router)               # /api/appointments/*
app.include_router(communication_logs.router)         # /api/communication-logs/*
app.include_router(client_documents.router)           # /api/client-documents/*
app.include_router(user_settings.router)              # /api/user-settings/*


# --- Error mapping: every failure is answered as {"message": ...} ---
@app.exception_handler(CRMError)
async def crm_error_handler(request: Request, exc: CRMError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=400, content={"message": "Invalid request"})
    first = errors[0]
    # int parts are list indexes or JSON byte offsets
    location = ".".join(
        str(p) for p in first.get("loc", ())
        if not isinstance(p, int) and p not in ("body", "query", "path")
    )
    message = f"{location}: {first['msg']}" if location else first["msg"]
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Storage error on %s %s: %s\n%s", request.method, request.url.path, exc, traceback.format_exc())
    return JSONResponse(status_code=400, content={"message": str(getattr(exc, "orig", None) or exc)})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Error in %s %s: %s\n%s", request.method, request.url.path, exc, traceback.format_exc())
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


# --- Root health check ---
@app.get("/")
async def root():
    return {"message": "EstateHub CRM API is running"}
