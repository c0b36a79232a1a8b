from sqlalchemy import select

from .database import DB, Base, db, db_context, filter_by


__all__ = ["Base", "DB", "db", "db_context", "filter_by", "select"]
