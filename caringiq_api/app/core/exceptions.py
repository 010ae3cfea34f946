"""
Domain errors raised by the service layer.

Routes translate these into HTTP responses; the submission store
itself never raises them.
"""


class SubmissionError(Exception):
    """Base class for rejected form submissions."""


class DuplicateEmailError(SubmissionError):
    """Raised when an email is already on the waitlist."""

    def __init__(self, email: str) -> None:
        super().__init__("Email already registered for waitlist")
        self.email = email
