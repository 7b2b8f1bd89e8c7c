import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cognito_gateway.core.config import settings
from cognito_gateway.middleware.cors import register_cors_middleware
from cognito_gateway.routes.auth import router as auth_router
from cognito_gateway.routes.health import router as health_router

logger = logging.getLogger(__name__)

app = FastAPI(title="Cognito Gateway")
logger.info(
    "Startup config: RUNTIME_MODE=%s COGNITO_REGION=%s REFINED_ERROR_STATUS=%s",
    settings.RUNTIME_MODE,
    settings.COGNITO_REGION or "unset",
    settings.COGNITO_REFINED_ERROR_STATUS,
)


@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: StarletteHTTPException):  # noqa: ARG001
    detail = exc.detail
    message = detail if isinstance(detail, str) and detail else "Request failed"
    return JSONResponse(status_code=exc.status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
def validation_exception_handler(request: Request, exc: RequestValidationError):  # noqa: ARG001
    logger.warning("Rejected malformed payload on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request payload"})


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
# Registered after CORSMiddleware so it wraps it and sees every response, preflights included.
register_cors_middleware(app)

app.include_router(health_router)
app.include_router(auth_router)
