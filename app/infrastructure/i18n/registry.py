"""Registry of named translator instances.

Several translator configurations can coexist under different names. The
first one loaded becomes the default used by the shortcut functions, unless
another default is set explicitly.

Usage:
    from infrastructure.i18n.registry import get_registry

    registry = get_registry()
    registry.load("AppTranslator", {"class_name": "app.i18n.AppTranslator"})

    translator = registry.get(registry.default_translator())
    translator.domains(["groups_index", "groups", "default"])
    translator.translate("Group.name")
"""

import importlib
from threading import RLock
from typing import Any, Dict, List, Mapping, Optional

from infrastructure.i18n.exceptions import (
    MissingTranslatorClassError,
    TranslatorConfigurationError,
)
from infrastructure.i18n.translator import TranslatorInterface
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()

# Bare class names are looked up in this module
DEFAULT_TRANSLATOR_MODULE = "infrastructure.i18n.translator"

_registry: Optional["TranslatorRegistry"] = None
_registry_lock = RLock()


class TranslatorRegistry:
    """Named translator instances with a designated default.

    Translator classes must subclass ``TranslatorInterface``. A class loaded
    without constructor options is shared through its ``get_instance()``;
    options create a dedicated instance for that name.
    """

    def __init__(self):
        self._translators: Dict[str, TranslatorInterface] = {}
        self._default: Optional[str] = None
        self._lock = RLock()

    def load(
        self, name: str, config: Optional[Mapping[str, Any]] = None
    ) -> TranslatorInterface:
        """Load the translator registered as ``name``.

        Args:
            name: Registry name.
            config: Optional settings. ``class_name`` selects the class (a
                bare name from ``infrastructure.i18n.translator`` or a dotted
                import path, default: ``name``); other keys are passed to the
                class constructor.

        Returns:
            The translator instance for ``name``.

        Raises:
            MissingTranslatorClassError: If the class cannot be found.
            TranslatorConfigurationError: If the class does not implement
                TranslatorInterface.
        """
        with self._lock:
            if name in self._translators:
                return self._translators[name]

            options = dict(config or {})
            class_name = options.pop("class_name", name)
            translator_class = self._resolve_class_name(class_name)
            instance = self._create(translator_class, options)

            self._translators[name] = instance
            if self._default is None:
                self._default = name

        logger.info(
            "translator_loaded",
            name=name,
            translator_class=class_name,
            default=self._default == name,
        )
        return instance

    def get(self, name: str) -> TranslatorInterface:
        """Return the translator registered as ``name``, loading it if needed.

        The configured default name is loaded with TRANSLATOR_CLASS; any other
        name is taken as the class name.
        """
        with self._lock:
            if name in self._translators:
                return self._translators[name]

            translator_settings = get_settings().translator
            config = {}
            if name == translator_settings.TRANSLATOR_DEFAULT_NAME:
                config["class_name"] = translator_settings.TRANSLATOR_CLASS
            return self.load(name, config)

    def loaded(self) -> List[str]:
        with self._lock:
            return list(self._translators)

    def unload(self, name: str) -> None:
        with self._lock:
            self._translators.pop(name, None)
            if self._default == name:
                self._default = None

    def default_translator(self, name: Optional[str] = None) -> str:
        """Set or return the name of the default translator.

        Args:
            name: New default name; loaded first if it is not loaded yet.

        Returns:
            The default name. When nothing was loaded or set, the configured
            TRANSLATOR_DEFAULT_NAME.
        """
        with self._lock:
            if name is not None:
                self.get(name)
                self._default = name
            if self._default is None:
                return get_settings().translator.TRANSLATOR_DEFAULT_NAME
            return self._default

    def _resolve_class_name(self, class_name: str) -> type:
        module_path, _, attribute = class_name.rpartition(".")
        module_path = module_path or DEFAULT_TRANSLATOR_MODULE

        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            logger.error("missing_translator_class", translator_class=class_name)
            raise MissingTranslatorClassError(
                f"Missing translator class {class_name}"
            ) from e

        translator_class = getattr(module, attribute, None)
        if translator_class is None:
            logger.error("missing_translator_class", translator_class=class_name)
            raise MissingTranslatorClassError(f"Missing translator class {class_name}")

        return translator_class

    def _create(
        self, translator_class: Any, options: Dict[str, Any]
    ) -> TranslatorInterface:
        if not (
            isinstance(translator_class, type)
            and issubclass(translator_class, TranslatorInterface)
        ):
            qualified = getattr(translator_class, "__qualname__", repr(translator_class))
            module = getattr(translator_class, "__module__", None)
            if module:
                qualified = f"{module}.{qualified}"
            logger.error("invalid_translator_class", translator_class=qualified)
            raise TranslatorConfigurationError(
                f"Translator class {qualified} does not implement TranslatorInterface"
            )

        if options:
            return translator_class(**options)
        return translator_class.get_instance()


def get_registry() -> TranslatorRegistry:
    """Get the translator registry singleton."""
    global _registry

    with _registry_lock:
        if _registry is None:
            _registry = TranslatorRegistry()
            logger.debug("initialized_translator_registry")
        return _registry


def clear_registry() -> None:
    """Reset the default translator and drop the registry (for testing).

    The next call to ``get_registry()`` builds a fresh registry.
    """
    global _registry

    with _registry_lock:
        if _registry is not None:
            default = _registry.default_translator()
            if default in _registry.loaded():
                _registry.get(default).reset()
        _registry = None
    logger.debug("cleared_translator_registry")
