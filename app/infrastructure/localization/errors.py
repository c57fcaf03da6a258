"""Errors raised by the request localization pipeline.

Only integration mistakes raise. Anything derived from request data
(malformed culture names, missing signals) degrades to the default culture.
"""


class LocalizationError(Exception):
    """Base class for request localization errors."""


class CultureNegotiationNotRunError(LocalizationError):
    """Raised when a request culture is applied without a negotiation result."""


class RequestCultureAlreadySetError(LocalizationError):
    """Raised when a request culture is published twice for one request."""


class RequestCultureNotSetError(LocalizationError):
    """Raised when a request culture is read before it was published.

    The localization middleware must run before any culture-sensitive stage.
    """
