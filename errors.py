"""Exception hierarchy for datetasks."""


class DateTasksError(Exception):
    """Base exception for datetasks errors.

    Carries a short user-facing message and optional internal details
    for logging.
    """

    def __init__(self, user_message: str, internal_details: str = "") -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message


class InvalidRangeError(DateTasksError):
    """Raised when a time span ends before it starts."""
