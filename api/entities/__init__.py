from .errors import DomainError, ErrorKind, NotOrganizer, SeatsNotIncreased, TooManySeats, WebinarNotFound
from .webinar import Webinar


__all__ = [
    "DomainError",
    "ErrorKind",
    "NotOrganizer",
    "SeatsNotIncreased",
    "TooManySeats",
    "Webinar",
    "WebinarNotFound",
]
