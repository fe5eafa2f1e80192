"""Token formatters for translated messages.

Formatters turn a message template plus token values into the final string.
Tokens are passed as a mapping; positional tokens use the keys "0", "1", ...
"""

import re
from abc import ABC, abstractmethod
from threading import Lock
from typing import Any, Callable, Dict, Mapping

from infrastructure.i18n.exceptions import TranslatorConfigurationError
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_FORMATTER = "default"

# Single-brace placeholders only; "{{id}}" is left as is
_ICU_PLACEHOLDER = re.compile(r"(?<!\{)\{(\w+)\}(?!\})")


class MessageFormatter(ABC):
    """Abstract base for token formatters."""

    @abstractmethod
    def format(self, locale: str, message: str, tokens: Mapping[str, Any]) -> str:
        """Interpolate ``tokens`` into ``message``.

        Args:
            locale: Locale the message is rendered for.
            message: Message template.
            tokens: Token values keyed by name or position.

        Returns:
            Formatted message.

        Raises:
            ValueError: If the template needs a token that was not provided.
        """
        pass


class IcuFormatter(MessageFormatter):
    """Formatter for ICU-style ``{0}`` / ``{name}`` placeholders."""

    def format(self, locale: str, message: str, tokens: Mapping[str, Any]) -> str:
        names = []
        for name in _ICU_PLACEHOLDER.findall(message):
            if name not in names:
                names.append(name)

        for name in names:
            if name not in tokens:
                logger.error(
                    "missing_interpolation_variable",
                    variable=name,
                    available_variables=list(tokens.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {name}")

        return _ICU_PLACEHOLDER.sub(lambda match: str(tokens[match.group(1)]), message)


class SprintfFormatter(MessageFormatter):
    """Formatter for printf-style ``%s`` / ``%d`` / ``%(name)s`` placeholders.

    Positional tokens feed ``%s``-style conversions in order; when there are
    no positional tokens the named ones feed ``%(name)s`` conversions.
    """

    def format(self, locale: str, message: str, tokens: Mapping[str, Any]) -> str:
        positional = sorted(
            (int(name), value) for name, value in tokens.items() if str(name).isdigit()
        )
        if positional:
            values: Any = tuple(value for _, value in positional)
        else:
            values = {
                name: value for name, value in tokens.items() if not name.startswith("_")
            }

        try:
            return message % values
        except (TypeError, KeyError, ValueError) as e:
            logger.error("sprintf_format_error", message=message, error=str(e))
            raise ValueError(f"Cannot format {message!r}: {e}") from e


class FormatterLocator:
    """Lazily instantiated formatters addressed by name.

    Registered by default:
        - ``default``: IcuFormatter
        - ``sprintf``: SprintfFormatter
    """

    def __init__(self, factories: Dict[str, Callable[[], MessageFormatter]] = None):
        self._factories: Dict[str, Callable[[], MessageFormatter]] = {
            DEFAULT_FORMATTER: IcuFormatter,
            "sprintf": SprintfFormatter,
        }
        if factories:
            self._factories.update(factories)
        self._instances: Dict[str, MessageFormatter] = {}
        self._lock = Lock()

    def register(self, name: str, factory: Callable[[], MessageFormatter]) -> None:
        """Register (or replace) the formatter factory for ``name``."""
        with self._lock:
            self._factories[name] = factory
            self._instances.pop(name, None)

    def get(self, name: str) -> MessageFormatter:
        """Return the formatter registered as ``name``.

        Raises:
            TranslatorConfigurationError: If no formatter is registered as ``name``.
        """
        with self._lock:
            if name not in self._instances:
                if name not in self._factories:
                    logger.error(
                        "unknown_formatter",
                        formatter=name,
                        available=sorted(self._factories),
                    )
                    raise TranslatorConfigurationError(f"Unknown formatter '{name}'")
                self._instances[name] = self._factories[name]()
            return self._instances[name]
