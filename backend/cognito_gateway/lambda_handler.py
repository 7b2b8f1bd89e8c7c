import json
import logging
from typing import Any, Dict

from mangum import Mangum

from cognito_gateway.core.config import settings
from cognito_gateway.main import app

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# Created at import so warm invocations reuse the app and its boto3 client.
asgi_handler = Mangum(app, lifespan="off")


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:  # noqa: ANN401
    """
    API Gateway proxy entry point.

    Runs the same FastAPI app the local listener serves.
    """
    if settings.LOG_LAMBDA_EVENTS:
        logger.info("EVENT: %s", json.dumps(event, default=str))
    return asgi_handler(event, context)
