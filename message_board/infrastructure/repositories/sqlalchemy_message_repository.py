"""SQLAlchemy implementation of MessageRepository."""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from message_board.domain.errors import StorageUnavailable
from message_board.models.message import Message

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy failures into StorageUnavailable."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Message storage error during {operation}: {e}")
        raise StorageUnavailable(operation, str(e)) from e


class SqlAlchemyMessageRepository:
    """Concrete MessageRepository backed by SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_ordered_by_text(self) -> List[Message]:
        """Get all messages ordered by text, detached from the session."""
        with _storage_errors("list"):
            result = await self._session.execute(
                select(Message).order_by(Message.text)
            )
            messages = list(result.scalars().all())
        for message in messages:
            self._session.expunge(message)
        return messages

    async def list_ids(self) -> List[int]:
        with _storage_errors("list_ids"):
            result = await self._session.execute(select(Message.id))
            return list(result.scalars().all())

    async def add(self, message: Message) -> Message:
        """Stage a new message and return it with ID populated."""
        try:
            self._session.add(message)
            await self._session.flush()
            await self._session.refresh(message)
        except SQLAlchemyError as e:
            # A failed flush leaves the session unusable until rolled back
            logger.error(f"Message storage error during add, rolling back: {e}")
            await self._session.rollback()
            raise StorageUnavailable("add", str(e)) from e
        return message

    async def get_by_id(self, message_id: int) -> Optional[Message]:
        with _storage_errors("get_by_id"):
            return await self._session.get(Message, message_id)

    async def remove(self, message: Message) -> None:
        with _storage_errors("remove"):
            await self._session.delete(message)

    async def commit(self) -> None:
        """Commit staged changes, rolling back if the commit fails."""
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Message storage commit failed, rolling back: {e}")
            await self._session.rollback()
            raise StorageUnavailable("commit", str(e)) from e
