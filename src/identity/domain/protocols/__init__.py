"""Identity Repository Protocols"""
from src.identity.domain.protocols.user_repository_protocol import IUserRepository

__all__ = ["IUserRepository"]
