"""
Data version ORM model.

Each row is one snapshot of a session's working dataset. Rows are
append-only; the newest created_at is the current dataset.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Dataset version persistence
"""

from sqlalchemy import BigInteger, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class DataVersionModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Data version ORM model.

    Attributes:
        session_id: Owning session
        version: Label such as "v0", "v1"
        file_name: Original or derived file name
        file_url: Public URL of the object in storage
        file_size: Size in bytes, if known
        description: Free text describing how the version was produced
    """

    __tablename__ = "data_versions"

    session_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("sessions.id"),
        nullable=False,
        index=True,
    )
    version: Mapped[str] = mapped_column(String(32), nullable=False)
    file_name: Mapped[str] = mapped_column(String(512), nullable=False)
    file_url: Mapped[str] = mapped_column(Text, nullable=False)
    file_size: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
