"""
TaskHub - Exceptions

Each error carries the HTTP status it maps to at the request boundary.
"""


class TaskHubError(Exception):
    """Base exception for request-level errors"""
    status_code = 500


class ValidationError(TaskHubError):
    """Raised when input is missing or malformed"""
    status_code = 400


class UnauthorizedError(TaskHubError):
    """Raised on bad credentials or a missing/invalid bearer token"""
    status_code = 401


class NotFoundError(TaskHubError):
    """Raised when a referenced entity does not exist"""
    status_code = 404


class ConflictError(TaskHubError):
    """Raised when a username or email is already taken"""
    status_code = 409


class InternalError(TaskHubError):
    """Raised when a persistence operation fails"""
    status_code = 500
