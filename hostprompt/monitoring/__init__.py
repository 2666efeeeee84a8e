# hostprompt/monitoring/__init__.py
"""
Error tracking integration.

Provides:
- Sentry error tracking (only when SENTRY_DSN is configured)
- Request tags on events
- Manual capture helper used by the generation pipeline
"""

import os

import sentry_sdk
from flask import Flask, request
from sentry_sdk.integrations.flask import FlaskIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration


def init_sentry(app: Flask) -> bool:
    """
    Initialize Sentry error tracking.

    Args:
        app: Flask application instance

    Returns:
        True when Sentry was initialized.
    """
    sentry_dsn = app.config.get("SENTRY_DSN") or os.getenv("SENTRY_DSN")

    if not sentry_dsn:
        app.logger.info("Sentry DSN not configured - error tracking disabled")
        return False

    sentry_sdk.init(
        dsn=sentry_dsn,
        integrations=[
            FlaskIntegration(transaction_style="url"),
            SqlalchemyIntegration(),
        ],
        traces_sample_rate=app.config.get("SENTRY_TRACES_SAMPLE_RATE", 0.1),
        environment=app.config.get("SENTRY_ENVIRONMENT", "production"),
        release=app.config.get("SENTRY_RELEASE", "unknown"),
        # Request bodies carry base64 photos and host-written text
        send_default_pii=False,
        max_request_body_size="never",
        attach_stacktrace=True,
        sample_rate=app.config.get("SENTRY_SAMPLE_RATE", 1.0),
        before_send=before_send_event,
    )

    app.logger.info(
        "Sentry initialized (environment=%s, traces_sample_rate=%s)",
        app.config.get("SENTRY_ENVIRONMENT", "production"),
        app.config.get("SENTRY_TRACES_SAMPLE_RATE", 0.1),
    )

    register_context_processors(app)
    return True


def before_send_event(event, hint):
    """
    Filter events before sending to Sentry.

    Health checks and 404s are dropped; everything else is grouped by
    exception type and the first 100 chars of its message.
    """
    url = (event.get("request") or {}).get("url", "")
    if url.endswith("/__health__") or url.endswith("/api/health"):
        return None

    values = (event.get("exception") or {}).get("values") or []
    if values:
        exc_type = values[0].get("type", "Unknown")
        if exc_type == "NotFound":
            return None
        event["fingerprint"] = [exc_type, (values[0].get("value") or "")[:100]]

    return event


def register_context_processors(app: Flask):
    """Tag each request with its endpoint so events can be filtered."""

    @app.before_request
    def add_sentry_context():
        sentry_sdk.set_tag("request_method", request.method)
        sentry_sdk.set_tag("endpoint", request.endpoint or "unknown")


def capture_exception(error: Exception, **extra_context):
    """
    Report an exception to Sentry if the SDK is active; no-op otherwise.

    Args:
        error: Exception to capture
        **extra_context: Additional context dicts attached to the event
    """
    if not sentry_sdk.is_initialized():
        return

    with sentry_sdk.new_scope() as scope:
        for key, value in extra_context.items():
            scope.set_context(key, value)
        sentry_sdk.capture_exception(error)
