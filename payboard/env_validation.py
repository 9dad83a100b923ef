import os
import logging
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

# Mandatory environment variables for production
REQUIRED_PRODUCTION_ENV_VARS = [
    "SECRET_KEY",
    "DATABASE_URL",
    "ALLOWED_HOSTS",
]

POSITIVE_INT_ENV_VARS = [
    "INVOICES_PER_PAGE",
    "LATEST_INVOICES_COUNT",
]


def validate_env():
    """
    Validate critical environment variables for Django settings.
    Runs once per process; subsequent calls are idempotent.
    """
    is_production = os.getenv("PRODUCTION", "false").lower() == "true"

    secret_key = os.getenv("SECRET_KEY")
    if not secret_key:
        if is_production:
            raise ImproperlyConfigured("CRITICAL: SECRET_KEY is required in production.")
        else:
            logger.warning("SECRET_KEY not set, using insecure default for development.")

    for var in POSITIVE_INT_ENV_VARS:
        raw = os.getenv(var)
        if raw is None:
            continue
        if not raw.strip().isdigit() or int(raw) < 1:
            error_msg = f"CRITICAL: {var} must be a positive integer, got {raw!r}"
            logger.critical(error_msg)
            raise ImproperlyConfigured(error_msg)

    if is_production:
        missing = [var for var in REQUIRED_PRODUCTION_ENV_VARS if not os.getenv(var)]
        if missing:
            error_msg = f"CRITICAL: Missing required environment variables in production: {', '.join(missing)}"
            logger.critical(error_msg)
            raise ImproperlyConfigured(error_msg)

        if secret_key and (secret_key.startswith("django-insecure") or len(secret_key) < 50):
            error_msg = "CRITICAL: SECRET_KEY must be a long, secure string in production"
            logger.critical(error_msg)
            raise ImproperlyConfigured(error_msg)

        if os.getenv("SIMULATE_DELETE_FAILURE", "false").lower() == "true":
            logger.warning("SIMULATE_DELETE_FAILURE is on in production: every invoice delete will fail.")

    logger.info("Environment validation passed successfully")
