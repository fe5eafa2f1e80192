"""Structured logging for the translation cache service.

Public API:
    - configure_logging(): set up structlog once, at application startup
    - get_module_logger(): logger bound to the calling module
    - bind_request_context(): request-scoped context for a block of code
    - get_correlation_id(): correlation id of the current request
    - clear_request_context(): drop every bound context variable

Example:
    from infrastructure.logging import bind_request_context, get_module_logger

    logger = get_module_logger()

    with bind_request_context(cache_key="TranslatorAutoload.groups.view"):
        logger.info("translation_cache_loaded")
"""

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
]
