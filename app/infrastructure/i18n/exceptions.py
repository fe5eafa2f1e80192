"""Custom exceptions for the translation system.

Lookup misses and cache store misses are not errors and never raise; these
exceptions signal misconfiguration that has to be fixed by the operator.
"""


class TranslatorError(Exception):
    """Base exception for all translator-related errors.

    Example:
        try:
            registry.load("AppTranslator", {"class_name": "app.Missing"})
        except TranslatorError as e:
            logger.error("translator_error", error=str(e))
    """

    pass


class TranslatorConfigurationError(TranslatorError):
    """Raised when the translator system is configured incorrectly.

    Covers translator classes that do not implement ``TranslatorInterface``,
    unknown formatter names, and unknown lifecycle actions.

    Example:
        >>> FormatterLocator().get("icu2")
        Traceback (most recent call last):
        ...
        TranslatorConfigurationError: Unknown formatter 'icu2'
    """

    pass


class MissingTranslatorClassError(TranslatorConfigurationError):
    """Raised when a translator class name cannot be resolved.

    Example:
        >>> registry.load("AppTranslator", {"class_name": "app.i18n.Missing"})
        Traceback (most recent call last):
        ...
        MissingTranslatorClassError: Missing translator class app.i18n.Missing
    """

    pass
