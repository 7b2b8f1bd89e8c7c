from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "*",
}


def register_cors_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        """
        Stamp the wildcard CORS headers on every response, whether or not the
        request carried an Origin header. CORSMiddleware answers preflights and
        echoes requested headers; the exact wildcards are written over that.
        Exceptions that escaped the routes become a JSON 500 here so the
        headers are still present.
        """
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse(status_code=500, content={"error": "Internal server error"})

        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response
