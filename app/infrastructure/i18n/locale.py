"""Request-scoped current locale.

The active locale lives in a ContextVar so concurrent requests served by the
same process each see their own value. When nothing was set, the configured
default locale is used.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generator, Optional

from infrastructure.services.providers import get_settings

_current_locale: ContextVar[Optional[str]] = ContextVar("current_locale", default=None)


def get_locale() -> str:
    """Return the locale of the current context, or the configured default."""
    locale = _current_locale.get()
    if locale is None:
        return get_settings().i18n.I18N_DEFAULT_LOCALE
    return locale


def set_locale(locale: Optional[str]) -> None:
    """Set the locale of the current context. None restores the default."""
    _current_locale.set(locale)


def reset_locale() -> None:
    _current_locale.set(None)


@contextmanager
def locale_context(locale: str) -> Generator[str, None, None]:
    """Use ``locale`` for the duration of the block.

    Example:
        with locale_context("fr_FR"):
            translator.translate("Group.name")
    """
    token = _current_locale.set(locale)
    try:
        yield locale
    finally:
        _current_locale.reset(token)
