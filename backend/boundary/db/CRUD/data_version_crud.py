"""
Data version CRUD operations.

"Latest" means newest created_at, never the highest version label.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Dataset version persistence operations
"""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.data_version_model import DataVersionModel


class DataVersionCRUD(BaseCRUD[DataVersionModel]):
    """CRUD operations for DataVersionModel."""

    def __init__(self) -> None:
        """Initialize DataVersionCRUD with DataVersionModel."""
        super().__init__(DataVersionModel)

    async def get_latest(
        self,
        session: AsyncSession,
        session_id: str,
    ) -> DataVersionModel | None:
        """
        Retrieve the most recently created version of a session.

        Args:
            session: Async database session
            session_id: Owning session

        Returns:
            Newest DataVersionModel, None if the session has none
        """
        stmt = (
            select(DataVersionModel)
            .where(DataVersionModel.session_id == session_id)
            .order_by(DataVersionModel.created_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_session(
        self,
        session: AsyncSession,
        session_id: str,
    ) -> Sequence[DataVersionModel]:
        """
        Retrieve all versions of a session, newest first.

        Args:
            session: Async database session
            session_id: Owning session

        Returns:
            Sequence of DataVersionModel rows
        """
        stmt = (
            select(DataVersionModel)
            .where(DataVersionModel.session_id == session_id)
            .order_by(DataVersionModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_by_session(self, session: AsyncSession, session_id: str) -> int:
        """Number of versions stored for a session."""
        stmt = (
            select(func.count())
            .select_from(DataVersionModel)
            .where(DataVersionModel.session_id == session_id)
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())


data_version_crud = DataVersionCRUD()
