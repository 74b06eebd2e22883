from .message_store import MessageStore, get_seeding_messages

__all__ = ["MessageStore", "get_seeding_messages"]
