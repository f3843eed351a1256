"""Persistence: SQLAlchemy engine, models, and repositories."""
