"""Shortcut translation functions using the default translator.

Each function returns None when no message is given. Token values may be
passed as one list or dict, as extra positional arguments, or as keyword
arguments::

    translate("Some string with {0} {1}", "multiple", "arguments")
    translate("Hello {name}", name="Ada")
    translate_plural("horse", "horses", 2)
    translate_context("context2", "X")
"""

from typing import Any, Dict, Optional

from infrastructure.i18n.registry import get_registry
from infrastructure.i18n.translator import TranslatorInterface, normalize_tokens


def _default_translator() -> TranslatorInterface:
    registry = get_registry()
    return registry.get(registry.default_translator())


def _collect_tokens(args: tuple, kwargs: Dict[str, Any]) -> Dict[str, Any]:
    if len(args) == 1 and isinstance(args[0], (list, tuple, dict)):
        tokens = normalize_tokens(args[0])
    else:
        tokens = normalize_tokens(args)
    tokens.update(kwargs)
    return tokens


def translate(singular: Optional[str], *args: Any, **kwargs: Any) -> Optional[str]:
    """Translate ``singular`` with the default translator."""
    if not singular:
        return None

    tokens = _collect_tokens(args, kwargs)
    return _default_translator().translate(singular, tokens)


def translate_plural(
    singular: Optional[str], plural: str, count: int, *args: Any, **kwargs: Any
) -> Optional[str]:
    """Translate the plural form of ``singular`` matching ``count``."""
    if not singular:
        return None

    tokens = {"_count": count, "_singular": singular}
    tokens.update(_collect_tokens(args, kwargs))
    return _default_translator().translate(plural, tokens)


def translate_context(
    context: str, singular: Optional[str], *args: Any, **kwargs: Any
) -> Optional[str]:
    """Translate ``singular`` in ``context``."""
    if not singular:
        return None

    tokens = {"_context": context}
    tokens.update(_collect_tokens(args, kwargs))
    return _default_translator().translate(singular, tokens)


def translate_context_plural(
    context: str,
    singular: Optional[str],
    plural: str,
    count: int,
    *args: Any,
    **kwargs: Any,
) -> Optional[str]:
    """Translate the plural form of ``singular`` in ``context`` matching ``count``."""
    if not singular:
        return None

    tokens = {"_count": count, "_singular": singular, "_context": context}
    tokens.update(_collect_tokens(args, kwargs))
    return _default_translator().translate(plural, tokens)
