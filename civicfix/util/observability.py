"""Logfire setup for the API process.

Services and use cases log through ``logfire`` directly::

    with logfire.span("issue_service.assign", issue_id=str(issue_id)):
        logfire.info("Issue assigned", staff_email=staff_email)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from civicfix.config import Settings

SERVICE_NAME = "civicfix-api"

# Liveness probes would otherwise dominate the trace view
EXCLUDED_URLS = "/health"

# Matched against attribute names on top of logfire's defaults
SCRUB_PATTERNS = ["webhook", "x-webhook-secret"]


def should_send(settings: Settings) -> bool:
    """Whether telemetry leaves the process.

    An explicit ``OBSERVABILITY__SEND_TO_LOGFIRE`` wins; otherwise telemetry
    is sent only when a token is configured.
    """
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once, before the app is created."""
    send = should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except liveness probes."""

    def request_attributes(request, attributes):
        client = getattr(request, "client", None)
        return {
            **attributes,
            "method": getattr(request, "method", None),
            "path": request.url.path,
            "client_host": client.host if client else None,
        }

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=request_attributes,
        excluded_urls=EXCLUDED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
