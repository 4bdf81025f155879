# daily_report/core/errors.py
# Domain failures raised by the services. main.py turns them into HTTP responses:
# `detail` is what the caller sees, `reason` is only written to the log.


class DomainError(Exception):
    """Base class for business rule violations."""
    status_code = 400
    reason = "domain_error"
    detail = "Request could not be processed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.detail)
        self.message = message or self.detail


class AuthFailure(DomainError):
    """Any failed login. Callers only ever see the generic detail."""
    status_code = 401
    reason = "auth_failure"
    detail = "Incorrect username or password"


class NotFound(DomainError):
    status_code = 404
    reason = "not_found"
    detail = "Not found"


class UnknownIdentity(AuthFailure, NotFound):
    status_code = 401
    reason = "not_found"
    detail = AuthFailure.detail


class Deactivated(AuthFailure):
    reason = "deactivated"


class InvalidCredentials(AuthFailure):
    reason = "invalid_credentials"


class InvalidToken(DomainError):
    status_code = 401
    reason = "invalid_token"
    detail = "Could not validate credentials"


class Forbidden(DomainError):
    status_code = 403
    reason = "forbidden"
    detail = "Not enough permissions for this resource"


class Locked(DomainError):
    status_code = 403
    reason = "locked"
    detail = "Past reports are locked and cannot be edited."


class EmptySubmission(DomainError):
    status_code = 400
    reason = "empty_submission"
    detail = "At least one report field is required"


class InvalidFilter(DomainError):
    status_code = 400
    reason = "invalid_filter"
    detail = "Use either a single date or a from/to range, not both"


class Conflict(DomainError):
    status_code = 409
    reason = "conflict"
    detail = "Conflicting record already exists"
