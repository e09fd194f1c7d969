"""
Error types raised by the services and media gateway.

Each error carries a message that is safe to return to the caller. The
handlers registered in ``app.main`` render every one of them as
``{"message": ...}`` with the matching status code.
"""


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        self.message = message
        super().__init__(message)


class ValidationError(ApiError):
    """Required input is missing or empty."""

    status_code = 400


class ConflictError(ApiError):
    """A unique key is already taken."""

    status_code = 409


class NotFoundError(ApiError):
    status_code = 404


class MediaHostError(ApiError):
    """The media host rejected or failed a request."""

    status_code = 500
