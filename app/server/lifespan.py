from contextlib import asynccontextmanager
import sys
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n.registry import get_registry
from infrastructure.i18n.stores import get_store
from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _load_default_translator(settings: "Settings", logger: BoundLogger) -> str:
    translator_settings = settings.translator
    registry = get_registry()

    try:
        registry.load(
            translator_settings.TRANSLATOR_DEFAULT_NAME,
            {"class_name": translator_settings.TRANSLATOR_CLASS},
        )
    except Exception as exc:
        logger.error("default_translator_load_failed", error=str(exc))
        raise

    default = registry.default_translator()
    logger.info("default_translator_loaded", name=default, loaded=registry.loaded())
    return default


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup", test_environment=_is_test_environment())
    _list_configs(settings, logger)

    app.state.default_translator = _load_default_translator(settings, logger)
    app.state.translation_cache_store = get_store()

    yield

    logger.info("application_shutdown")
