"""
Session CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Session persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.session_model import SessionModel


class SessionCRUD(BaseCRUD[SessionModel]):
    """CRUD operations for SessionModel with owner-scoped listing."""

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def get_by_user(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> Sequence[SessionModel]:
        """
        Retrieve a user's sessions, newest first.

        Args:
            session: Async database session
            user_id: Owner identifier

        Returns:
            Sequence of SessionModel rows
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.user_id == user_id)
            .order_by(SessionModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


session_crud = SessionCRUD()
