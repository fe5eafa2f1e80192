"""Request-scoped logging context.

Entries logged while a request is handled carry its correlation id, its
path and method, and the translation cache key and locale of the matched
route, so cache load and save events can be traced back to a request.
"""

import uuid
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    cache_key: Optional[str] = None,
    locale: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind request context to every entry logged inside the block.

    Args:
        correlation_id: Request identifier. A UUID4 is generated when omitted.
        request_path: HTTP request path, e.g. "/groups/42".
        request_method: HTTP method.
        cache_key: Translation cache store key of the route.
        locale: Locale resolved for the request.
        **extra_context: Additional key-value pairs.

    Example:
        with bind_request_context(
            correlation_id=request.headers.get("x-correlation-id"),
            cache_key=binding.cache_key(),
            locale=translator.lang(),
        ):
            binding.initialize()
    """
    optional = {
        "request_path": request_path,
        "request_method": request_method,
        "cache_key": cache_key,
        "locale": locale,
    }
    context: Dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}
    context.update((name, value) for name, value in optional.items() if value is not None)
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Return the correlation id bound to the current context, if any."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
