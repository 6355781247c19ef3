"""Custom exceptions for the i18n system.

Loading errors are raised to the caller of Catalog.load_bundle; template
errors never leave the resolver.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            catalog.load_bundle("ru", "locales/ru.json")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class BundleReadError(I18nError, OSError):
    """Raised when a bundle source file cannot be read.

    Example:
        >>> catalog.load_bundle("ru", "missing.json")
        Traceback (most recent call last):
        ...
        BundleReadError: Failed to read bundle 'missing.json': ...
    """

    pass


class BundleParseError(I18nError, ValueError):
    """Raised when a bundle is not valid JSON or its top level is not an object.

    Example:
        >>> catalog.load_bundle("ru", "broken.json")
        Traceback (most recent call last):
        ...
        BundleParseError: Failed to parse bundle 'broken.json': ...
    """

    pass


class TemplateError(I18nError, ValueError):
    """Raised when a translation template cannot be parsed or rendered.

    Covers unclosed or malformed actions and references to variables that
    were not supplied.
    """

    pass
