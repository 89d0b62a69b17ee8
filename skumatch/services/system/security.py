"""
Security service for handling Rate Limiting and other security extensions.
"""
import os
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from skumatch.services.system.logger_service import get_logger

logger = get_logger(__name__)

def get_limiter_storage_uri():
    return os.getenv("RATELIMIT_STORAGE_URI") or "memory://"

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=get_limiter_storage_uri(),
    strategy="fixed-window"
)


def configure_limiter(app):
    """
    Attach the limiter to the app instance.
    RATELIMIT_ENABLED=false turns limits off (used by the test suite).
    """
    enabled = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"
    app.config["RATELIMIT_ENABLED"] = enabled
    logger.info("Initializing Flask-Limiter for request rate limiting", extra={"enabled": enabled})
    limiter.init_app(app)
