"""Module: base."""

from sqlalchemy.orm import DeclarativeBase

# Shared SQLAlchemy declarative base for pets and medication records.
# Alembic reads Base.metadata to autogenerate migrations.
class Base(DeclarativeBase):
    pass
