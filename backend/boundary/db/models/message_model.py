"""
Message ORM model.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Chat message persistence
"""

from typing import Any

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class MessageModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Immutable chat message, ordered by created_at within a session.

    Attributes:
        session_id: Owning session
        role: "user" or "assistant"
        content: Message text
        artifacts: Optional payload (imageBase64, or fileUrl and fileName)
    """

    __tablename__ = "messages"

    session_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("sessions.id"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(String(16), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    artifacts: Mapped[dict[str, Any] | None] = mapped_column(
        JSON,
        nullable=True,
        default=None,
    )
