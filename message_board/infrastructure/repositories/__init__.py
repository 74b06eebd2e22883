from .sqlalchemy_message_repository import SqlAlchemyMessageRepository

__all__ = ["SqlAlchemyMessageRepository"]
