"""
Domain Exceptions - Acquisition failure taxonomy
Clean Architecture: Domain layer exceptions

Location failures and fetch failures are raised by their adapters and
reach the presentation layer wrapped in a single AcquisitionException.
"""
from typing import Optional


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    kind = "domain_error"

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidDateTimeException(DomainException):
    """Raised when a forecast timestamp does not match the feed format"""
    kind = "invalid_datetime"


# =============================
# Location failures
# =============================

class LocationException(DomainException):
    """Raised when the current position could not be resolved"""
    kind = "location_error"


class LocationPermissionDeniedException(LocationException):
    """Raised when the user denied access to location services"""
    kind = "permission_denied"


class LocationUnavailableException(LocationException):
    """Raised when the platform could not determine a position"""
    kind = "unavailable"


class LocationProviderException(LocationException):
    """Raised for any other location source error (keeps the original cause)"""
    kind = "location_error"

    def __init__(self, message: str, cause: Optional[BaseException] = None, details: dict = None):
        super().__init__(message, details=details)
        self.cause = cause


# =============================
# Fetch failures
# =============================

class FetchException(DomainException):
    """Raised when the forecast could not be fetched or decoded"""
    kind = "fetch_error"


class InvalidRequestException(FetchException):
    """Raised when the request URL cannot be built (no network call is made)"""
    kind = "invalid_request"


class TransportException(FetchException):
    """Raised for network-layer errors: DNS, connection reset, timeout expiry"""
    kind = "transport"

    def __init__(self, message: str, cause: Optional[BaseException] = None, details: dict = None):
        super().__init__(message, details=details)
        self.cause = cause


class InvalidResponseException(FetchException):
    """Raised when the reply is not a well-formed HTTP response"""
    kind = "invalid_response"


class EmptyBodyException(FetchException):
    """Raised when the HTTP response carries zero bytes"""
    kind = "empty_body"


class DecodeFailedException(FetchException):
    """Raised when the body is not a valid forecast document"""
    kind = "decode_failed"


# =============================
# Unified failure
# =============================

class AcquisitionException(DomainException):
    """
    Unified failure returned to the presentation layer

    Wraps exactly one LocationException or FetchException without
    transforming it. The wrapped failure is available as `failure`
    (and as `__cause__` when raised with `raise ... from failure`).
    """

    def __init__(self, failure: DomainException):
        super().__init__(failure.message, details=dict(failure.details))
        self.failure = failure

    @property
    def kind(self) -> str:
        return self.failure.kind

    @property
    def is_location_failure(self) -> bool:
        return isinstance(self.failure, LocationException)

    @property
    def is_fetch_failure(self) -> bool:
        return isinstance(self.failure, FetchException)
