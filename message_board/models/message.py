from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Message(Base):
    __tablename__ = "messages"

    # Assigned by the database on insert
    id: Mapped[Optional[int]] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )

    # Message body, no length limit at this layer
    text: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        preview = (self.text or "")[:30]
        return f"<Message(id={self.id}, text={preview!r})>"
