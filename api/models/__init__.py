from .webinars import Webinar


__all__ = ["Webinar"]
