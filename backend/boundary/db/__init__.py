"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - SessionModel, MessageModel, DataVersionModel: Domain entities
  - session_crud, message_crud, data_version_crud: CRUD operation singletons

Dependencies: sqlalchemy, backend.configs
System role: Database adapter providing persistent storage for sessions,
messages, and dataset versions.
"""

from backend.boundary.db.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from backend.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)
from backend.boundary.db.models import (
    DataVersionModel,
    MessageModel,
    SessionMode,
    SessionModel,
)
from backend.boundary.db.CRUD import (
    BaseCRUD,
    DataVersionCRUD,
    MessageCRUD,
    SessionCRUD,
    data_version_crud,
    message_crud,
    session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "SessionModel",
    "SessionMode",
    "MessageModel",
    "DataVersionModel",
    # CRUD classes
    "BaseCRUD",
    "SessionCRUD",
    "MessageCRUD",
    "DataVersionCRUD",
    # CRUD singletons
    "session_crud",
    "message_crud",
    "data_version_crud",
]
