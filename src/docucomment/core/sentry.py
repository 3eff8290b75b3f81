"""Sentry error tracking integration for docucomment."""
import os
from typing import Any

import sentry_sdk

from docucomment.constants import EnvVars
from docucomment.core.logging import get_logger


def init_sentry(service_name: str = "docucomment") -> None:
    """Initialize Sentry with service tagging.

    Does nothing unless SENTRY_DSN is set.

    Args:
        service_name: Unique service identifier (default: 'docucomment')
    """
    def _tag_event(event: Any, hint: Any) -> Any:
        event.setdefault("tags", {})
        event["tags"]["service"] = service_name
        event["tags"]["language"] = "python"
        return event

    dsn = os.getenv(EnvVars.SENTRY_DSN)
    if not dsn:
        return

    environment = os.getenv(EnvVars.SENTRY_ENVIRONMENT, "development")
    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        traces_sample_rate=1.0 if environment == "development" else 0.1,
        attach_stacktrace=True,
        max_breadcrumbs=50,
        before_send=_tag_event,
    )

    sentry_sdk.set_tag("service", service_name)
    sentry_sdk.set_tag("language", "python")

    logger = get_logger("sentry")
    logger.info("sentry_initialized", service=service_name, environment=environment)
