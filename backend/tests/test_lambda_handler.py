from __future__ import annotations

import json

from cognito_gateway import lambda_handler


def _api_gateway_event(method: str, path: str, body: dict | None = None, query: dict | None = None) -> dict:
    headers = {
        "Host": "abc123.execute-api.us-east-1.amazonaws.com",
        "X-Forwarded-Proto": "https",
        "X-Forwarded-Port": "443",
        "Content-Type": "application/json",
    }
    return {
        "resource": "/{proxy+}",
        "path": path,
        "httpMethod": method,
        "headers": headers,
        "multiValueHeaders": {k: [v] for k, v in headers.items()},
        "queryStringParameters": query,
        "multiValueQueryStringParameters": {k: [v] for k, v in query.items()} if query else None,
        "pathParameters": {"proxy": path.lstrip("/")},
        "stageVariables": None,
        "requestContext": {
            "resourcePath": "/{proxy+}",
            "httpMethod": method,
            "path": f"/dev{path}",
            "stage": "dev",
            "requestId": "req-1",
            "identity": {"sourceIp": "203.0.113.10"},
        },
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False,
    }


def _headers(resp: dict) -> dict:
    return {k.lower(): v for k, v in (resp.get("headers") or {}).items()}


def test_lambda_health_check():
    resp = lambda_handler.handler(_api_gateway_event("GET", "/"), None)

    assert resp["statusCode"] == 200
    assert json.loads(resp["body"]) == {"success": "Server is healthy!!!", "url": "/"}
    assert _headers(resp)["access-control-allow-origin"] == "*"
    assert _headers(resp)["access-control-allow-headers"] == "*"


def test_lambda_routes_post_body_to_same_app(monkeypatch):
    seen = {}

    def _confirm(email, code):
        seen.update(email=email, code=code)

    monkeypatch.setattr("cognito_gateway.routes.auth.cognito_confirm_sign_up", _confirm)

    event = _api_gateway_event("POST", "/confirm-user", body={"email": "user@example.com", "code": "123456"})
    resp = lambda_handler.handler(event, None)

    assert resp["statusCode"] == 200
    assert json.loads(resp["body"]) == {"message": "User confirmed successfully"}
    assert seen == {"email": "user@example.com", "code": "123456"}


def test_lambda_logs_event_when_enabled(monkeypatch, caplog):
    monkeypatch.setattr(lambda_handler.settings, "LOG_LAMBDA_EVENTS", True)

    with caplog.at_level("INFO", logger=lambda_handler.logger.name):
        lambda_handler.handler(_api_gateway_event("GET", "/"), None)

    assert any(record.getMessage().startswith("EVENT: ") for record in caplog.records)


def test_lambda_skips_event_log_when_disabled(monkeypatch, caplog):
    monkeypatch.setattr(lambda_handler.settings, "LOG_LAMBDA_EVENTS", False)

    with caplog.at_level("INFO", logger=lambda_handler.logger.name):
        lambda_handler.handler(_api_gateway_event("GET", "/"), None)

    assert not any(record.getMessage().startswith("EVENT: ") for record in caplog.records)
