"""
Message Store - Facade over the persisted collection of messages.

This service handles:
- Listing messages ordered by text
- Adding a message and committing it
- Deleting one message by ID (missing IDs are a no-op)
- Deleting every message in a single commit
- Bootstrapping the collection with seed messages

The store holds no cache: each call reads or writes through to the injected
repository, and backend failures surface as StorageUnavailable.
"""

import logging
from typing import List

from ..domain import errors
from ..domain.repositories import MessageRepository
from ..models.message import Message

logger = logging.getLogger(__name__)

SEED_TEXTS = (
    "You're standing on my scarf.",
    "Would you like a jelly baby?",
    "To the rational mind, nothing is inexplicable; only unexplained.",
)


def get_seeding_messages() -> List[Message]:
    """Build fresh, unsaved seed messages in their fixed order."""
    return [Message(text=text) for text in SEED_TEXTS]


def _validate_new_message(message: Message) -> None:
    if message.id is not None:
        raise errors.ValidationError("id", f"already assigned ({message.id})")
    text = message.text
    if text is None:
        raise errors.ValidationError("text", "required")
    if not isinstance(text, str):
        raise errors.ValidationError("text", f"expected str, got {type(text).__name__}")
    if not text.strip():
        raise errors.ValidationError("text", "must not be empty")


class MessageStore:
    """Asynchronous CRUD surface for messages."""

    def __init__(self, repository: MessageRepository) -> None:
        self._repository = repository

    async def list_messages(self) -> List[Message]:
        """Return all messages ordered by text ascending."""
        messages = await self._repository.list_ordered_by_text()
        logger.debug(f"Listed {len(messages)} messages")
        return messages

    async def add_message(self, message: Message) -> Message:
        """
        Insert a message and commit it.

        Args:
            message: New message with text set and ID unset

        Returns:
            The persisted message with its ID assigned

        Raises:
            ValidationError: text is missing or blank, or ID already set
            StorageUnavailable: the insert or commit failed
        """
        _validate_new_message(message)
        try:
            await self._repository.add(message)
            await self._repository.commit()
        except errors.StorageUnavailable:
            # Nothing was persisted, so the flushed ID is not the message's
            message.id = None
            raise
        logger.info(f"Added message {message.id}")
        return message

    async def delete_message(self, message_id: int) -> bool:
        """
        Delete a message by ID.

        Returns:
            True if a message was removed, False if none had that ID
        """
        message = await self._repository.get_by_id(message_id)
        if message is None:
            logger.debug(f"Message {message_id} not found, nothing to delete")
            return False

        await self._repository.remove(message)
        await self._repository.commit()
        logger.info(f"Deleted message {message_id}")
        return True

    async def delete_all_messages(self) -> int:
        """
        Delete every message with a single commit.

        IDs are snapshotted before any removal, so messages inserted
        concurrently after the snapshot are left in place.

        Returns:
            Number of messages removed
        """
        message_ids = await self._repository.list_ids()
        removed = 0
        for message_id in message_ids:
            message = await self._repository.get_by_id(message_id)
            if message is None:
                continue
            await self._repository.remove(message)
            removed += 1

        await self._repository.commit()
        logger.info(f"Deleted all messages ({removed} removed)")
        return removed

    async def initialize_with_seed_data(self) -> List[Message]:
        """
        Insert the seed messages and commit once.

        Not idempotent: each call adds another copy of every seed message.
        """
        messages = get_seeding_messages()
        for message in messages:
            await self._repository.add(message)
        await self._repository.commit()
        logger.info(f"Seeded {len(messages)} messages")
        return messages
