"""Translator and request autoload settings."""

from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class TranslatorSettings(InfrastructureSettings):
    """Translator registry and autoload configuration.

    Environment Variables:
        TRANSLATOR_DEFAULT_NAME: Registry name used by the shortcut functions
            (default: TranslationCache)
        TRANSLATOR_CLASS: Translator class, a bare name from
            ``infrastructure.i18n.translator`` or a dotted import path
        TRANSLATOR_AUTOLOAD_EVENTS: JSON dict of lifecycle phase -> action
            (``load``, ``save`` or null)

    Lifecycle phases:
        initialize, startup, before_render, before_redirect, shutdown

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        events = settings.translator.TRANSLATOR_AUTOLOAD_EVENTS
        # {"before_render": "load", "shutdown": "save"}
        ```
    """

    TRANSLATOR_DEFAULT_NAME: str = Field(
        default="TranslationCache", alias="TRANSLATOR_DEFAULT_NAME"
    )
    TRANSLATOR_CLASS: str = Field(default="TranslationCache", alias="TRANSLATOR_CLASS")
    TRANSLATOR_AUTOLOAD_EVENTS: Dict[str, Optional[str]] = Field(
        default_factory=lambda: {"before_render": "load", "shutdown": "save"},
        alias="TRANSLATOR_AUTOLOAD_EVENTS",
    )

    @field_validator("TRANSLATOR_AUTOLOAD_EVENTS", mode="before")
    @classmethod
    def validate_autoload_events(cls, v: Any) -> Any:
        """Fall back to an empty mapping when the value is not a dict."""
        if v is None or not isinstance(v, dict):
            return {}
        return v
