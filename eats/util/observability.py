"""Logfire setup for the API process.

Services open spans around store and image-host work:

    with logfire.span("restaurant_service.create", user_id=str(user_id)):
        ...

and emit structured events for notable outcomes:

    logfire.info("User provisioned", user_id=str(user.id), auth0_id=user.auth0_id)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from eats.config import Settings

# Bearer tokens and Cloudinary credentials never leave the process
SCRUB_PATTERNS = ["authorization", "bearer", "api_secret", "imageFile"]

# Load balancer probes would otherwise dominate the trace volume
UNTRACED_PATHS = ["/health"]


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending follows OBSERVABILITY__SEND_TO_LOGFIRE when set and
    otherwise follows the presence of OBSERVABILITY__LOGFIRE_TOKEN.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name="eats-backend",
        service_version="1.0.0",
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes.

    Headers are not captured, so the Authorization header is never recorded.
    """

    def _request_attributes(request, attributes):
        result = dict(attributes)
        result["method"] = getattr(request, "method", None)
        result["path"] = request.url.path
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_PATHS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL issued through the application's engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
