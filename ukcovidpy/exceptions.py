"""
Custom exceptions for ukcovidpy package
"""


class CovidAPIError(Exception):
    """Base exception for all API-related errors"""
    pass


class CovidValidationError(CovidAPIError):
    """Raised when a request is built with invalid arguments"""
    pass


class CovidNetworkError(CovidAPIError):
    """Raised when the HTTP transport fails"""
    pass


class CovidNoDataError(CovidAPIError):
    """Raised when the API has no data for the query (HTTP 204)"""
    pass


class CovidRateLimitError(CovidAPIError):
    """Raised when API rate limit is exceeded (HTTP 429)"""
    pass


class CovidProtocolError(CovidAPIError):
    """Raised when a response does not follow the API contract"""
    pass


class CovidDecodeError(CovidProtocolError):
    """Raised when a row value cannot be coerced to its metric's type"""
    pass


# Errors a caller can reasonably retry or report.
RECOVERABLE_ERRORS = (CovidNetworkError, CovidNoDataError, CovidRateLimitError)
