from __future__ import annotations

from fastapi import APIRouter, Request

from cognito_gateway.schemas.auth import HealthOut

router = APIRouter(tags=["health"])


def _request_url(request: Request) -> str:
    # Path plus query string, as received.
    path = request.url.path
    query = request.url.query
    return f"{path}?{query}" if query else path


@router.get("/", response_model=HealthOut)
def health_check(request: Request):
    return HealthOut(success="Server is healthy!!!", url=_request_url(request))
