"""
Custom Exceptions - Application-specific error types
"""
from typing import Optional


class HabitSyncException(Exception):
    """Base exception for all habit sync errors"""
    status_code = 500
    default_error = "Internal server error"

    def __init__(self, error: Optional[str] = None, message: Optional[str] = None):
        self.error = error or self.default_error
        self.message = message
        super().__init__(message or self.error)

    def to_dict(self) -> dict:
        """Structured body returned to HTTP callers"""
        body = {"error": self.error}
        if self.message:
            body["message"] = self.message
        return body


class ConfigurationError(HabitSyncException):
    """Raised when Notion credentials or the database id are missing"""
    status_code = 500
    default_error = "Notion API not configured"


class AuthError(HabitSyncException):
    """Raised when Notion rejects the API key"""
    status_code = 401
    default_error = "Invalid Notion API key"


class NotFoundError(HabitSyncException):
    """Raised when the configured database does not exist or is not shared"""
    status_code = 404
    default_error = "Database not found"


class ValidationError(HabitSyncException):
    """Raised when a sync payload is malformed"""
    status_code = 400
    default_error = "Invalid request payload"


class TransportError(HabitSyncException):
    """Raised for any other Notion or network failure"""
    status_code = 500
    default_error = "Notion request failed"


class HabitStateError(Exception):
    """Base exception for rejected changes to today's habit list"""
    pass


class InvalidHabitDataError(HabitStateError):
    """Raised when habit text is empty or the list cannot be synced"""
    pass


class HabitLimitError(HabitStateError):
    """Raised when adding past the maximum number of habits"""
    pass


class HabitNotFoundError(HabitStateError):
    """Raised when a habit position does not exist"""
    pass


class NothingToResetError(HabitStateError):
    """Raised when resetting a day with no completed habits"""
    pass


class ApiClientError(Exception):
    """Raised when the terminal front end cannot talk to the backend"""
    pass
