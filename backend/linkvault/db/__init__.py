"""Database declarations — SQLAlchemy Base shared by all ORM models."""
