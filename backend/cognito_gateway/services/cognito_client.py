"""
Wrapper around boto3 Cognito Identity Provider APIs.

Provides a stable, exception-friendly interface for the routes to call
without leaking boto3-specific errors up the stack. Every failure, whether
Cognito rejected the call or botocore never got a response, surfaces as a
CognitoClientError carrying a human-readable message.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from cognito_gateway.core.config import settings

MISSING_ACCESS_TOKEN_MESSAGE = "Login failed: missing access token"


class CognitoClientError(Exception):
    """Raised when Cognito returns an error."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code

    @property
    def message(self) -> str:
        return self.args[0]


@dataclass(frozen=True)
class CognitoConfig:
    region: str
    client_id: str


@lru_cache(maxsize=1)
def get_cognito_config() -> CognitoConfig:
    """Snapshot region and app client id once per process."""
    return CognitoConfig(
        region=settings.COGNITO_REGION,
        client_id=settings.COGNITO_APP_CLIENT_ID,
    )


def _require_cognito_client_config(config: CognitoConfig) -> None:
    if not config.region:
        raise CognitoClientError("ConfigurationError", "COGNITO_REGION is not configured")
    if not config.client_id:
        raise CognitoClientError("ConfigurationError", "COGNITO_APP_CLIENT_ID is not configured")


@lru_cache(maxsize=1)
def _get_cognito_client():
    config = get_cognito_config()
    _require_cognito_client_config(config)
    return boto3.client("cognito-idp", region_name=config.region)


def _client_and_id():
    client = _get_cognito_client()
    return client, get_cognito_config().client_id


def _translate_error(exc: Exception) -> CognitoClientError:
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        code = error.get("Code", "CognitoClientError")
        message = error.get("Message") or str(exc)
        return CognitoClientError(code=code, message=message)
    return CognitoClientError(code=type(exc).__name__, message=str(exc))


def cognito_sign_up(
    email: str | None,
    password: str | None,
    first_name: str | None,
    last_name: str | None,
) -> dict:
    """Call Cognito SignUp API and return its response unchanged."""
    client, client_id = _client_and_id()
    try:
        return client.sign_up(
            ClientId=client_id,
            Username=email,
            Password=password,
            UserAttributes=[
                {"Name": "email", "Value": email},
                {"Name": "given_name", "Value": first_name},
                {"Name": "family_name", "Value": last_name},
            ],
        )
    except (ClientError, BotoCoreError) as exc:
        raise _translate_error(exc) from exc


def cognito_confirm_sign_up(email: str | None, code: str | None) -> None:
    """Confirm user signup with verification code."""
    client, client_id = _client_and_id()
    try:
        client.confirm_sign_up(
            ClientId=client_id,
            Username=email,
            ConfirmationCode=code,
        )
    except (ClientError, BotoCoreError) as exc:
        raise _translate_error(exc) from exc


def cognito_initiate_auth(email: str | None, password: str | None) -> dict:
    """
    Run the USER_PASSWORD_AUTH flow and return the AuthenticationResult.

    Challenges (MFA, NEW_PASSWORD_REQUIRED) come back without tokens and are
    reported as a failed login.
    """
    client, client_id = _client_and_id()
    try:
        resp = client.initiate_auth(
            ClientId=client_id,
            AuthFlow="USER_PASSWORD_AUTH",
            AuthParameters={
                "USERNAME": email,
                "PASSWORD": password,
            },
        )
    except (ClientError, BotoCoreError) as exc:
        raise _translate_error(exc) from exc

    tokens = resp.get("AuthenticationResult") or {}
    if not tokens.get("AccessToken"):
        raise CognitoClientError("MissingAccessToken", MISSING_ACCESS_TOKEN_MESSAGE)
    return tokens


def cognito_get_user(access_token: str) -> dict[str, str]:
    """Fetch user attributes using an access token."""
    client = _get_cognito_client()
    try:
        resp = client.get_user(AccessToken=access_token)
    except (ClientError, BotoCoreError) as exc:
        raise _translate_error(exc) from exc

    return attributes_to_profile(resp.get("UserAttributes") or [])


def attributes_to_profile(attributes: list[dict]) -> dict[str, str]:
    # Entries without both a name and a value are dropped.
    profile: dict[str, str] = {}
    for attr in attributes:
        name = attr.get("Name")
        value = attr.get("Value")
        if name and value:
            profile[name] = value
    return profile


def cognito_resend_confirmation_code(email: str | None) -> None:
    """Ask Cognito to send a fresh signup confirmation code."""
    client, client_id = _client_and_id()
    try:
        client.resend_confirmation_code(
            ClientId=client_id,
            Username=email,
        )
    except (ClientError, BotoCoreError) as exc:
        raise _translate_error(exc) from exc
