"""Errors raised by the webinar use cases, independent of any transport."""

import enum


class ErrorKind(enum.Enum):
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    VALIDATION = "validation"


class DomainError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class WebinarNotFound(DomainError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, webinar_id: str):
        super().__init__("Webinar not found")
        self.webinar_id = webinar_id


class NotOrganizer(DomainError):
    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, webinar_id: str, user_id: str):
        super().__init__("User is not allowed to update this webinar")
        self.webinar_id = webinar_id
        self.user_id = user_id


class SeatsNotIncreased(DomainError):
    kind = ErrorKind.VALIDATION

    def __init__(self, current: int, requested: int):
        super().__init__("You cannot reduce the number of seats")
        self.current = current
        self.requested = requested


class TooManySeats(DomainError):
    kind = ErrorKind.VALIDATION

    def __init__(self, maximum: int, requested: int):
        super().__init__(f"Webinar must have at most {maximum} seats")
        self.maximum = maximum
        self.requested = requested
