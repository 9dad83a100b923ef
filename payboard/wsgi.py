"""
Payboard - WSGI Application

Validates the environment before Django is initialised so a misconfigured
deployment fails at boot instead of on the first request.
"""

import os
import sys
import logging

logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "payboard.settings")

try:
    from payboard.env_validation import validate_env
    validate_env()
except Exception as e:
    logger.critical(f"Environment validation failed: {e}")
    sys.exit(1)

try:
    from django.core.wsgi import get_wsgi_application
    application = get_wsgi_application()
except Exception as e:
    logger.critical(f"Failed to initialize Django WSGI: {e}")
    sys.exit(1)
