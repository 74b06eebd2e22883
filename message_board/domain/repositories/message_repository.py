"""MessageRepository protocol: the storage backend contract for messages."""

from typing import List, Optional, Protocol, runtime_checkable


@runtime_checkable
class MessageRepository(Protocol):
    """Storage backend capability consumed by MessageStore.

    Writes (add, remove) are staged and only become durable on commit().
    """

    async def list_ordered_by_text(self) -> List[object]:
        """Get every message ordered by text ascending.

        Returns:
            List of Message objects detached from change tracking.
        """
        ...

    async def list_ids(self) -> List[int]:
        """Get a snapshot of every stored message ID."""
        ...

    async def add(self, message: object) -> object:
        """Stage a new message for insertion.

        Args:
            message: The Message object to persist (ID unset).

        Returns:
            The same Message object with its ID populated.
        """
        ...

    async def get_by_id(self, message_id: int) -> Optional[object]:
        """Look up a message by ID, or None when absent."""
        ...

    async def remove(self, message: object) -> None:
        """Stage a message for deletion."""
        ...

    async def commit(self) -> None:
        """Make all staged changes durable.

        On failure the staged changes are discarded before the error is raised.
        """
        ...
