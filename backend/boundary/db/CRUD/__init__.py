"""
CRUD operations package.

Exports CRUD classes and their module-level singletons.
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.data_version_crud import DataVersionCRUD, data_version_crud
from backend.boundary.db.CRUD.message_crud import MessageCRUD, message_crud
from backend.boundary.db.CRUD.session_crud import SessionCRUD, session_crud

__all__ = [
    "BaseCRUD",
    "SessionCRUD",
    "MessageCRUD",
    "DataVersionCRUD",
    "session_crud",
    "message_crud",
    "data_version_crud",
]
