"""
JWT Service - Token Generation and Verification
External adapter for JWT operations
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Union
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from src.shared.exceptions import UnauthorizedError
from src.shared.infrastructure.observability.logger import get_logger
from src.shared.security.tokens.ports import TokenIssuerPort
from src.shared.utils.strings import parse_duration

logger = get_logger(__name__)


class JWTService(TokenIssuerPort):
    """
    Session token issuer.

    Tokens carry only the account id under `_id`, plus `iat` / `exp`.
    There is no refresh flow: a client logs in again once a token expires.
    """

    DEFAULT_EXPIRES_IN = "7d"

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_in: Union[str, int] = DEFAULT_EXPIRES_IN,
    ) -> None:
        """
        Initialize JWT service.

        Args:
            secret_key: Secret key for signing tokens
            algorithm: JWT algorithm (default: HS256)
            expires_in: Token lifetime ("7d", "12h", "30m", "45s" or seconds)
        """
        if not secret_key:
            raise ValueError("JWT secret must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl: timedelta = parse_duration(expires_in)

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: Union[str, UUID]) -> str:
        """
        Sign a session token for `user_id`.

        Returns:
            Encoded JWT token string
        """
        now = datetime.now(timezone.utc)
        payload = {
            "_id": str(user_id),
            "iat": now,
            "exp": now + self._ttl,
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        logger.debug("Issued session token", user_id=str(user_id))
        return token

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a session token.

        Raises:
            UnauthorizedError: expired_token / invalid_token
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except ExpiredSignatureError:
            logger.info("Session token expired")
            raise UnauthorizedError("Token has expired.", code="expired_token")
        except InvalidTokenError as e:
            logger.info("Invalid session token", reason=str(e))
            raise UnauthorizedError("Invalid token.", code="invalid_token")

        if not payload.get("_id"):
            raise UnauthorizedError("Invalid token.", code="invalid_token")
        return payload
