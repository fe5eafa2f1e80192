"""Structlog configuration for the translation cache service.

Development runs render to the console, production runs (empty ``PREFIX``)
render JSON. Every entry carries the service name and the deployed revision
so cache store events can be matched to a release. Nothing is emitted while
pytest is running.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("translation_cache_imported", locales=["fr_FR"])
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

import structlog
from structlog.stdlib import BoundLogger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "translator-autoload"

Processor = Callable[[Any, str, Dict[str, Any]], Dict[str, Any]]


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def add_app_info(app_name: str, app_version: str = "unknown") -> Processor:
    """Create a processor adding ``app_name`` and ``app_version`` to entries."""

    def processor(
        logger: Any, method_name: str, event_dict: Dict[str, Any]
    ) -> Dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


def _silence() -> BoundLogger:
    # Root level above CRITICAL drops every record
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)
    return structlog.stdlib.get_logger()


def build_processors(app_version: str, json_output: bool) -> List[Processor]:
    """Return the processor chain, ending with the console or JSON renderer."""
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_info(APP_NAME, app_version),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog for the application.

    Args:
        settings: Settings instance. Loaded through the settings provider when
            not given.
        log_level: Overrides ``settings.LOG_LEVEL``.
        is_production: Overrides ``settings.is_production`` (JSON output).

    Returns:
        Configured logger instance.
    """
    if _is_test_environment():
        return _silence()

    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    json_output = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=build_processors(settings.GIT_SHA, json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Example:
        # In infrastructure/i18n/stores/memory.py
        logger = get_module_logger()
        # context: {"component": "memory",
        #           "module_path": "infrastructure.i18n.stores.memory"}
    """
    base = structlog.stdlib.get_logger()

    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame else None
    module = inspect.getmodule(frame) if frame else None
    if module is None:
        return base.bind(component="unknown")

    return base.bind(
        component=module.__name__.split(".")[-1],
        module_path=module.__name__,
    )
