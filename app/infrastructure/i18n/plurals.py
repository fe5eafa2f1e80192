"""Plural form selection for catalog messages.

Rules follow the gettext ``Plural-Forms`` headers for the languages the
application ships catalogs for. Languages without a rule use the Germanic
two-form rule (``n != 1``).
"""

from typing import Callable, Dict


def _slavic(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _czech(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


PLURAL_RULES: Dict[str, Callable[[int], int]] = {
    # One form
    "ja": lambda n: 0,
    "ko": lambda n: 0,
    "zh": lambda n: 0,
    "vi": lambda n: 0,
    "th": lambda n: 0,
    "tr": lambda n: 0,
    # Two forms, singular for 0 and 1
    "fr": lambda n: int(n > 1),
    "pt_BR": lambda n: int(n > 1),
    # Three forms
    "ru": _slavic,
    "uk": _slavic,
    "be": _slavic,
    "sr": _slavic,
    "hr": _slavic,
    "pl": _polish,
    "cs": _czech,
    "sk": _czech,
}


def plural_index(locale: str, n: int) -> int:
    """Return the plural form index to use for ``n`` items in ``locale``.

    Args:
        locale: Locale identifier (e.g., "fr_FR", "pt_BR", "en").
        n: Item count.

    Returns:
        Zero-based index into the list of plural forms.
    """
    n = abs(int(n))
    normalized = locale.replace("-", "_")
    rule = PLURAL_RULES.get(normalized) or PLURAL_RULES.get(
        normalized.split("_")[0]
    )
    if rule is None:
        return int(n != 1)
    return rule(n)
