"""
Session ORM model.

Represents a user chat session. Messages and data versions reference it
by session_id.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Session persistence for chat context management
"""

import enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class SessionMode(str, enum.Enum):
    """Mode tag a session was created with."""

    DEFAULT = "default"
    DATA_ANALYSIS = "data-analysis"
    DATA_PREPARATION = "data-preparation"


class SessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Session ORM model.

    Sessions are never physically deleted. No relationship is declared to
    messages or data versions so nothing cascades.

    Attributes:
        id: UUID string primary key (auto-generated)
        user_id: Identity provider subject of the owner
        title: Display title
        mode: One of SessionMode values
        current_data_version: Version label pointer, "v0" on creation
        created_at: Session creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "sessions"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="New Chat")
    mode: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=SessionMode.DEFAULT.value,
    )
    current_data_version: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="v0",
    )
