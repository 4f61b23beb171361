"""Custom application exceptions."""

from accessgate.core.access import Decision


class AppException(Exception):
    """Base application exception."""

    code = "APPLICATION_ERROR"

    def __init__(self, message: str, status_code: int = 500):
        """Initialize exception with message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundException(AppException):
    """Resource not found exception."""

    code = "NOT_FOUND"

    def __init__(self, message: str = "Resource not found"):
        """Initialize with 404 status code."""
        super().__init__(message, status_code=404)


class UnauthorizedException(AppException):
    """Unauthorized access exception."""

    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "Unauthorized"):
        """Initialize with 401 status code."""
        super().__init__(message, status_code=401)


class ForbiddenException(AppException):
    """Forbidden access exception."""

    code = "FORBIDDEN"

    def __init__(self, message: str = "Forbidden"):
        """Initialize with 403 status code."""
        super().__init__(message, status_code=403)


class BadRequestException(AppException):
    """Bad request exception."""

    code = "BAD_REQUEST"

    def __init__(self, message: str = "Bad request"):
        """Initialize with 400 status code."""
        super().__init__(message, status_code=400)


class AccessDeniedException(AppException):
    """Raised by a gate when the access decision is a denial."""

    def __init__(self, decision: Decision):
        """Initialize from a denial decision."""
        if decision.allowed:
            raise ValueError("AccessDeniedException requires a denial decision")
        rule = decision.rule
        self.decision = decision
        self.code = decision.code
        self.redirect_to = rule.redirect_to
        super().__init__(rule.message, status_code=rule.status_code)


class AccountStoreError(AppException):
    """The account store could not be read."""

    code = "INFRASTRUCTURE_ERROR"

    def __init__(self, message: str = "Unable to verify account access"):
        """Initialize with 500 status code."""
        super().__init__(message, status_code=500)
