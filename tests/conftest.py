from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.identity.domain.entities.user import User
from src.identity.infrastructure.persistence.repositories.user_repository import UserRepository
from src.main import create_app
from src.shared.infrastructure.database.session import DatabaseSessionFactory

# registers every table on Base.metadata
import src.orders.infrastructure.persistence.models  # noqa: F401

TEST_JWT_SECRET = "test-secret-for-storefront-suite"


# ── collaborators for unit tests ─────────────────────────────────────────────

@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_email.return_value = None
    repo.get_by_email_and_answer.return_value = None
    return repo


@pytest.fixture
def passwords() -> MagicMock:
    codec = MagicMock()
    codec.hash_password.side_effect = lambda plain: f"hashed::{plain}"
    codec.compare_password.side_effect = lambda plain, digest: digest == f"hashed::{plain}"
    return codec


@pytest.fixture
def tokens() -> MagicMock:
    issuer = MagicMock()
    issuer.issue.return_value = "signed.jwt.token"
    return issuer


# ── database / application ───────────────────────────────────────────────────

@pytest.fixture
async def db(tmp_path):
    factory = DatabaseSessionFactory(f"sqlite+aiosqlite:///{tmp_path / 'repo.db'}")
    await factory.create_all()
    yield factory
    await factory.dispose()


@pytest.fixture
async def session(db):
    async with db.session() as s:
        yield s


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'app.db'}",
        JWT_SECRET=TEST_JWT_SECRET,
        ENV="test",
        LOG_LEVEL="WARNING",
        DB_AUTO_CREATE=True,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


# ── end-to-end helpers ───────────────────────────────────────────────────────

@pytest.fixture
def signup(client):
    def _signup(email: str, password: str = "secret-pass", **overrides):
        payload = {
            "name": email.split("@")[0],
            "email": email,
            "password": password,
            "phone": "5550100",
            "address": "1 Market Street",
            "answer": "blue",
        }
        payload.update(overrides)
        r = client.post("/api/v1/auth/register", json=payload)
        assert r.status_code == 201, r.text
        login = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        body = login.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _signup


@pytest.fixture
def run_db(client):
    """Run `fn(session)` against the app's own database from a sync test."""

    def _run(fn, *args):
        async def _call():
            async with client.app.state.db.session() as s:
                return await fn(s, *args)

        return client.portal.call(_call)

    return _run


async def _grant_admin(session, email):
    repo = UserRepository(session)
    user = await repo.get_by_email(email)
    await repo.update_by_id(user.id, {"role": User.ADMIN})


@pytest.fixture
def admin(signup, run_db):
    """Headers of a freshly registered account promoted to role 1."""
    user, headers = signup("admin@example.test")
    run_db(_grant_admin, "admin@example.test")
    return user, headers
