"""
Base Model Mixins and column helpers

Ids use the generic Uuid type so the same tables work on SQLite and PostgreSQL.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Uuid, func
import uuid


def uuid_ref(target: str = None, nullable: bool = False, index: bool = True) -> Column:
    """UUID column, optionally a foreign key to `table.id`"""
    args = [ForeignKey(target)] if target else []
    return Column(Uuid(as_uuid=True), *args, nullable=nullable, index=index)


class UUIDMixin:
    """Random UUID primary key"""
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    """Database-side created/updated timestamps"""
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
