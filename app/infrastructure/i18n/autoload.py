"""Per-request loading and saving of the translation cache.

A ``RequestCacheBinding`` ties the translator to the current route: it derives
the domains to search and the cache store key from the route, imports the
stored cache at one lifecycle phase and writes it back at another.

Default configuration loads before rendering and saves at shutdown, so the
translations are available in the view and saved after rendering::

    {"before_render": "load", "shutdown": "save"}

To have them available in the handler too and saved before a redirect::

    {"initialize": "load", "before_redirect": "save", "shutdown": "save"}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional

from infrastructure.i18n.exceptions import TranslatorConfigurationError
from infrastructure.i18n.inflector import camelize, underscore
from infrastructure.i18n.stores.base import TranslationCacheStore
from infrastructure.i18n.translator import TranslatorInterface
from infrastructure.logging import get_module_logger

logger = get_module_logger()

COMPONENT_NAME = "TranslatorAutoload"


class LifecyclePhase(str, Enum):
    """Request lifecycle phases, in the order they occur."""

    INITIALIZE = "initialize"
    STARTUP = "startup"
    BEFORE_RENDER = "before_render"
    BEFORE_REDIRECT = "before_redirect"
    SHUTDOWN = "shutdown"


class CacheAction(str, Enum):
    """What to do with the translation cache at a lifecycle phase."""

    LOAD = "load"
    SAVE = "save"
    NONE = "none"

    @classmethod
    def from_config(cls, value: Optional[str]) -> "CacheAction":
        """Parse a configured action; None and "null" mean no action.

        Raises:
            TranslatorConfigurationError: If ``value`` is not a known action.
        """
        if value is None or value in ("", "null"):
            return cls.NONE
        try:
            return cls(value)
        except ValueError as e:
            raise TranslatorConfigurationError(
                f"Unknown translation cache action '{value}'"
            ) from e


DEFAULT_EVENTS: Dict[str, Optional[str]] = {
    LifecyclePhase.BEFORE_RENDER.value: CacheAction.LOAD.value,
    LifecyclePhase.SHUTDOWN.value: CacheAction.SAVE.value,
}


@dataclass(frozen=True)
class RouteParams:
    """Route parameters of the current request.

    Attributes:
        plugin: Plugin (sub-application) name, if any.
        controller: Controller name, e.g. "posts".
        action: Action name, e.g. "index".
    """

    plugin: Optional[str] = None
    controller: Optional[str] = None
    action: Optional[str] = None


class RequestCacheBinding:
    """Loads and saves the translation cache of the current route.

    Attributes:
        translator: Translator whose cache is loaded and saved.
        store: Persistent store for exported caches.
        route: Route parameters of the request.
        events: Configured action name per lifecycle phase.
    """

    def __init__(
        self,
        translator: TranslatorInterface,
        store: TranslationCacheStore,
        route: RouteParams,
        events: Optional[Mapping[str, Optional[str]]] = None,
    ):
        self.translator = translator
        self.store = store
        self.route = route
        self.events = self._setup_events(DEFAULT_EVENTS if events is None else events)
        self._domains: Optional[List[str]] = None
        self._cache_key: Optional[str] = None

    @staticmethod
    def _setup_events(
        events: Mapping[str, Optional[str]],
    ) -> Dict[LifecyclePhase, Optional[str]]:
        known = {phase.value: phase for phase in LifecyclePhase}
        configured: Dict[LifecyclePhase, Optional[str]] = {}
        for name, action in events.items():
            phase = known.get(str(name))
            if phase is None:
                logger.warning("unknown_lifecycle_phase", phase=name)
                continue
            # Actions are only validated when their phase is dispatched
            configured[phase] = action
        return configured

    def domains(self) -> List[str]:
        """Return the domains to search for the current route.

        For plugin "Admin", controller "Posts" and action "index"::

            ["admin_posts_index", "posts_index", "admin_posts", "posts", "default"]

        Duplicates are removed keeping the first occurrence.
        """
        if self._domains is None:
            controller = underscore(self.route.controller)
            action = underscore(self.route.action)
            plugin = underscore(self.route.plugin)
            plugin_prefix = f"{plugin}_" if plugin else ""

            candidates = [
                f"{plugin_prefix}{controller}_{action}",
                f"{controller}_{action}",
                f"{plugin_prefix}{controller}",
                controller,
                "default",
            ]
            self._domains = list(dict.fromkeys(candidates))

        return self._domains

    def cache_key(self) -> str:
        """Return the store key for the current route.

        Format: ``TranslatorAutoload.{Plugin.}{controller}.{action}``.
        """
        if self._cache_key is None:
            plugin = camelize(self.route.plugin)
            plugin_part = f"{plugin}." if plugin else ""
            controller = self.route.controller or ""
            action = self.route.action or ""
            self._cache_key = f"{COMPONENT_NAME}.{plugin_part}{controller}.{action}"

        return self._cache_key

    def load(self) -> None:
        """Set the translator domains and import the stored cache, if any."""
        self.translator.domains(self.domains())
        cache_key = self.cache_key()
        cache = self.store.read(cache_key)

        if cache is None:
            logger.debug("translation_cache_not_stored", cache_key=cache_key)
            return

        self.translator.import_cache(cache)
        logger.debug("translation_cache_loaded", cache_key=cache_key)

    def save(self) -> None:
        """Write the translator cache to the store if it was tainted."""
        if not self.translator.tainted():
            return

        cache_key = self.cache_key()
        self.store.write(cache_key, self.translator.export())
        logger.debug("translation_cache_saved", cache_key=cache_key)

    def dispatch(self, phase: LifecyclePhase) -> CacheAction:
        """Run the action configured for ``phase``.

        Returns:
            The action that ran.

        Raises:
            TranslatorConfigurationError: If the configured action is unknown.
        """
        phase = LifecyclePhase(phase)
        configured = self.events.get(phase)
        try:
            action = CacheAction.from_config(configured)
        except TranslatorConfigurationError:
            logger.error(
                "unknown_translation_cache_action",
                phase=phase.value,
                action=configured,
            )
            raise

        if action is CacheAction.LOAD:
            self.load()
        elif action is CacheAction.SAVE:
            self.save()

        return action

    def initialize(self) -> CacheAction:
        return self.dispatch(LifecyclePhase.INITIALIZE)

    def startup(self) -> CacheAction:
        return self.dispatch(LifecyclePhase.STARTUP)

    def before_render(self) -> CacheAction:
        return self.dispatch(LifecyclePhase.BEFORE_RENDER)

    def before_redirect(self) -> CacheAction:
        return self.dispatch(LifecyclePhase.BEFORE_REDIRECT)

    def shutdown(self) -> CacheAction:
        return self.dispatch(LifecyclePhase.SHUTDOWN)
