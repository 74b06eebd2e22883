from .base import Base
from .message import Message

__all__ = ["Base", "Message"]
