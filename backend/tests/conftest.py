import os

# Settings are read at import time; pin a deterministic Cognito config before importing the app.
os.environ.setdefault("COGNITO_REGION", "us-east-1")
os.environ.setdefault("COGNITO_APP_CLIENT_ID", "test-client-id")
os.environ.setdefault("RUNTIME_MODE", "local")
os.environ.setdefault("LOG_LAMBDA_EVENTS", "false")

import pytest
from fastapi.testclient import TestClient

from cognito_gateway.core import config as app_config
from cognito_gateway.main import app as fastapi_app
from cognito_gateway.services import cognito_client


@pytest.fixture(autouse=True)
def _reset_cognito_caches():
    """
    The config snapshot and boto3 client are cached per process. Clear them around
    each test so settings tweaks and client stubs never leak between tests.
    """
    cognito_client.get_cognito_config.cache_clear()
    cognito_client._get_cognito_client.cache_clear()
    try:
        yield
    finally:
        cognito_client.get_cognito_config.cache_clear()
        cognito_client._get_cognito_client.cache_clear()


@pytest.fixture(autouse=True)
def _reset_mutable_settings():
    keys = [
        "COGNITO_REGION",
        "COGNITO_APP_CLIENT_ID",
        "COGNITO_REFINED_ERROR_STATUS",
        "RUNTIME_MODE",
        "LOG_LAMBDA_EVENTS",
    ]
    original = {k: getattr(app_config.settings, k) for k in keys}
    try:
        yield
    finally:
        for k, v in original.items():
            setattr(app_config.settings, k, v)


@pytest.fixture()
def app():
    return fastapi_app


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c
