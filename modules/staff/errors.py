"""Failures of record store operations. Every one of them is recoverable."""


class RecordStoreError(Exception):
    """Base class; ``str(exc)`` is safe to show to the user."""

    message = "The operation could not be completed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MissingField(RecordStoreError):
    message = "All fields are required."

    def __init__(self, field: str | None = None) -> None:
        super().__init__()
        self.field = field


class AlreadyExists(RecordStoreError):
    message = "Username already exists."


class InvalidCredentials(RecordStoreError):
    message = "Invalid username or password."


class NotAuthenticated(RecordStoreError):
    message = "You must be logged in to submit an application."


class DuplicateApplication(RecordStoreError):
    message = "You have already submitted an application."


class OutOfRange(RecordStoreError):
    message = "Application not found."

    def __init__(self, index: int | None = None) -> None:
        super().__init__()
        self.index = index


class NotPending(RecordStoreError):
    message = "Only pending applications can be accepted or rejected."
