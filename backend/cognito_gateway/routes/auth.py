from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from cognito_gateway.core.config import settings
from cognito_gateway.schemas.auth import (
    ConfirmIn,
    LoginIn,
    LoginOut,
    MessageOut,
    ResendIn,
    SignupIn,
    SignupOut,
)
from cognito_gateway.services.cognito_client import (
    CognitoClientError,
    cognito_confirm_sign_up,
    cognito_get_user,
    cognito_initiate_auth,
    cognito_resend_confirmation_code,
    cognito_sign_up,
)


logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

UNAUTHORIZED_CODES = {"NotAuthorizedException", "UserNotFoundException"}
THROTTLED_CODES = {"TooManyRequestsException", "LimitExceededException", "TooManyFailedAttemptsException"}
PROVIDER_FAULT_CODES = {"InternalErrorException", "EndpointConnectionError", "ConnectTimeoutError", "ReadTimeoutError"}


def _error_status(code: str) -> int:
    if not settings.COGNITO_REFINED_ERROR_STATUS:
        return 400
    if code in UNAUTHORIZED_CODES:
        return 401
    if code in THROTTLED_CODES:
        return 429
    if code in PROVIDER_FAULT_CODES:
        return 502
    return 400


def _translate_cognito_error(action: str, exc: CognitoClientError) -> HTTPException:
    logger.warning("%s failed (code=%s): %s", action, exc.code, exc.message)
    return HTTPException(status_code=_error_status(exc.code), detail=exc.message)


@router.post("/signup", response_model=SignupOut)
def signup(payload: Optional[SignupIn] = None):
    payload = payload or SignupIn()
    try:
        resp = cognito_sign_up(payload.email, payload.password, payload.first_name, payload.last_name)
    except CognitoClientError as exc:
        raise _translate_cognito_error("Signup", exc)
    return SignupOut(message="User signed up", response=resp)


@router.post("/confirm-user", response_model=MessageOut)
def confirm_user(payload: Optional[ConfirmIn] = None):
    payload = payload or ConfirmIn()
    try:
        cognito_confirm_sign_up(payload.email, payload.code)
    except CognitoClientError as exc:
        raise _translate_cognito_error("Confirm", exc)
    return MessageOut(message="User confirmed successfully")


@router.post("/login", response_model=LoginOut)
def login(payload: Optional[LoginIn] = None):
    payload = payload or LoginIn()
    try:
        tokens = cognito_initiate_auth(payload.email, payload.password)
        user = cognito_get_user(tokens["AccessToken"])
    except CognitoClientError as exc:
        raise _translate_cognito_error("Login", exc)
    return LoginOut(message="Login successful", tokens=tokens, user=user)


@router.post("/resend", response_model=MessageOut)
def resend_code(payload: Optional[ResendIn] = None):
    payload = payload or ResendIn()
    try:
        cognito_resend_confirmation_code(payload.email)
    except CognitoClientError as exc:
        raise _translate_cognito_error("Resend confirmation code", exc)
    return MessageOut(message="Confirmation code resent successfully")
