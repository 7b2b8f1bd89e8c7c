# cognito_gateway/core/config.py
import os

from dotenv import load_dotenv


def str_to_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def first_env(*names: str, default: str = "") -> str:
    for name in names:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return default


RUNTIME_LOCAL = "local"
RUNTIME_LAMBDA = "lambda"


class Settings:
    def __init__(self) -> None:
        # Only load .env for local/dev. In Lambda, env vars come from the function config.
        self.ENV = os.getenv("ENV", "dev").strip().lower()  # dev | prod
        if self.ENV != "prod":
            load_dotenv()

        # ----------------------------
        # Cognito
        # ----------------------------
        self.COGNITO_REGION = first_env("COGNITO_REGION", "REGION", "AWS_REGION")
        self.COGNITO_APP_CLIENT_ID = first_env("COGNITO_APP_CLIENT_ID", "COGNITO_CLIENT_ID")
        # Off by default: every provider failure is reported as 400.
        self.COGNITO_REFINED_ERROR_STATUS = str_to_bool(os.getenv("COGNITO_REFINED_ERROR_STATUS"), default=False)

        # ----------------------------
        # Runtime
        # ----------------------------
        default_runtime = RUNTIME_LAMBDA if os.getenv("AWS_LAMBDA_FUNCTION_NAME") else RUNTIME_LOCAL
        self.RUNTIME_MODE = os.getenv("RUNTIME_MODE", default_runtime).strip().lower()  # local | lambda
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = int(os.getenv("PORT", "3000"))

        # ----------------------------
        # Logging
        # ----------------------------
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        self.LOG_LAMBDA_EVENTS = str_to_bool(os.getenv("LOG_LAMBDA_EVENTS"), default=True)

        self._validate()

    def _validate(self) -> None:
        if self.RUNTIME_MODE not in {RUNTIME_LOCAL, RUNTIME_LAMBDA}:
            raise RuntimeError(f"RUNTIME_MODE must be '{RUNTIME_LOCAL}' or '{RUNTIME_LAMBDA}'")

        if self.ENV != "prod":
            return

        missing: list[str] = []
        if not self.COGNITO_REGION:
            missing.append("COGNITO_REGION")
        if not self.COGNITO_APP_CLIENT_ID:
            missing.append("COGNITO_APP_CLIENT_ID")

        if missing:
            raise RuntimeError(f"Missing required prod env vars: {', '.join(missing)}")

    @property
    def is_prod(self) -> bool:
        return self.ENV == "prod"

    @property
    def is_lambda(self) -> bool:
        return self.RUNTIME_MODE == RUNTIME_LAMBDA


settings = Settings()
