"""
Message CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Chat message persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.message_model import MessageModel


class MessageCRUD(BaseCRUD[MessageModel]):
    """CRUD operations for MessageModel."""

    def __init__(self) -> None:
        """Initialize MessageCRUD with MessageModel."""
        super().__init__(MessageModel)

    async def get_by_session(
        self,
        session: AsyncSession,
        session_id: str,
    ) -> Sequence[MessageModel]:
        """
        Retrieve all messages of a session in creation order.

        Args:
            session: Async database session
            session_id: Owning session

        Returns:
            Sequence of MessageModel rows, oldest first
        """
        stmt = (
            select(MessageModel)
            .where(MessageModel.session_id == session_id)
            .order_by(MessageModel.created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


message_crud = MessageCRUD()
