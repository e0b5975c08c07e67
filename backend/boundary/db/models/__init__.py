"""
Database models package.

Exports:
  - SessionModel, SessionMode: Session ORM model and mode enum
  - MessageModel: Chat message ORM model
  - DataVersionModel: Dataset version ORM model

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from backend.boundary.db.models.session_model import SessionMode, SessionModel
from backend.boundary.db.models.message_model import MessageModel
from backend.boundary.db.models.data_version_model import DataVersionModel

__all__ = [
    "SessionModel",
    "SessionMode",
    "MessageModel",
    "DataVersionModel",
]
