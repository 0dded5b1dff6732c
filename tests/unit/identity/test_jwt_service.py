import uuid
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from src.identity.infrastructure.adapters.jwt_service import JWTService
from src.shared.exceptions import UnauthorizedError

SECRET = "unit-test-secret-0123456789abcdef-xyz"


def test_token_carries_only_id_and_times():
    user_id = uuid.uuid4()
    token = JWTService(SECRET).issue(user_id)

    payload = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert set(payload) == {"_id", "iat", "exp"}
    assert payload["_id"] == str(user_id)
    assert payload["exp"] - payload["iat"] == int(timedelta(days=7).total_seconds())


def test_custom_lifetime():
    svc = JWTService(SECRET, expires_in="30m")
    payload = svc.decode(svc.issue(uuid.uuid4()))
    assert payload["exp"] - payload["iat"] == 1800


def test_decode_round_trip():
    svc = JWTService(SECRET)
    user_id = uuid.uuid4()
    assert svc.decode(svc.issue(user_id))["_id"] == str(user_id)


def test_expired_token_rejected():
    past = datetime.now(timezone.utc) - timedelta(days=8)
    token = jwt.encode(
        {"_id": "abc", "iat": past, "exp": past + timedelta(days=7)}, SECRET, algorithm="HS256"
    )
    with pytest.raises(UnauthorizedError) as exc:
        JWTService(SECRET).decode(token)
    assert exc.value.code == "expired_token"
    assert exc.value.status_code == 401


def test_foreign_signature_rejected():
    token = JWTService("someone-else-entirely-0123456789abcdef").issue(uuid.uuid4())
    with pytest.raises(UnauthorizedError) as exc:
        JWTService(SECRET).decode(token)
    assert exc.value.code == "invalid_token"


def test_garbage_rejected():
    with pytest.raises(UnauthorizedError):
        JWTService(SECRET).decode("not.a.token")


def test_empty_secret_refused():
    with pytest.raises(ValueError):
        JWTService("")
