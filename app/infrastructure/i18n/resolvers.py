"""Locale resolution logic for determining a request's language.

Provides the strategy for picking the locale from an HTTP ``Accept-Language``
header among the locales the application supports.
"""

from typing import List, Optional

import structlog

logger = structlog.get_logger().bind(component="i18n.resolver")


def normalize_locale(locale_str: str) -> str:
    """Normalize a language tag to the catalog form ("fr-fr" -> "fr_FR")."""
    parts = locale_str.strip().replace("-", "_").split("_")
    if len(parts) == 1:
        return parts[0].lower()
    return f"{parts[0].lower()}_{parts[1].upper()}"


class LocaleResolver:
    """Resolves the request locale from the Accept-Language header.

    Fallback chain:
    1. Exact match of a requested tag, highest quality first
    2. Language-only match (e.g., "fr" matches "fr_FR")
    3. Default locale
    """

    def __init__(self, default_locale: str, supported_locales: List[str]):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when no preference matches.
            supported_locales: Locales the application serves.
        """
        self.default_locale = default_locale
        self.supported_locales = list(supported_locales)
        self.log = logger.bind(default_locale=default_locale)

    def resolve_from_header(self, accept_language: Optional[str]) -> str:
        """Resolve locale from an Accept-Language header value.

        Args:
            accept_language: Header value, e.g. "fr-FR,fr;q=0.9,en;q=0.8".

        Returns:
            Resolved supported locale, or the default if none match.
        """
        if not accept_language:
            return self.default_locale

        # "fr-FR,fr;q=0.9" -> [("fr-FR", 1.0), ("fr", 0.9)]
        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range or lang_range == "*":
                continue
            quality = 1.0

            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0

            preferences.append((lang_range, quality))

        for lang_range, _ in sorted(preferences, key=lambda x: x[1], reverse=True):
            requested = normalize_locale(lang_range)

            for locale in self.supported_locales:
                if normalize_locale(locale) == requested:
                    self.log.debug("resolved_from_header", locale=locale)
                    return locale

            lang_code = requested.split("_")[0]
            for locale in self.supported_locales:
                if normalize_locale(locale).split("_")[0] == lang_code:
                    self.log.debug("resolved_from_header", locale=locale)
                    return locale

        self.log.debug("no_matching_locale_in_header", header=accept_language)
        return self.default_locale
