"""Error taxonomy shared by services and routers.

Each error carries the HTTP status it is rendered with; `app.main` registers
one handler that turns any of them into a ``{"message": ...}`` body.
"""


class CRMError(Exception):
    """Base exception for the CRM backend."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnauthenticatedError(CRMError):
    """Missing, invalid or expired bearer token, or failed login."""
    status_code = 401


class ForbiddenError(CRMError):
    """Role is not allowed to perform the action."""
    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class ValidationError(CRMError, ValueError):
    """Missing or malformed input."""
    status_code = 400


class NotFoundError(CRMError, LookupError):
    """Identifier does not resolve to a stored record."""
    status_code = 404


class UpstreamError(CRMError):
    """Storage or third-party provider failure."""
    status_code = 400
