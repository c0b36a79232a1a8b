from .webinars import InMemoryWebinarRepository, SQLWebinarRepository, WebinarRepository


__all__ = ["InMemoryWebinarRepository", "SQLWebinarRepository", "WebinarRepository"]
