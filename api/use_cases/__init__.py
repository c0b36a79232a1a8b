from .change_seats import ChangeSeats


__all__ = ["ChangeSeats"]
