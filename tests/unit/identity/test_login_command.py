import pytest

from src.identity.application.commands.login_command import LoginCommand, LoginCommandHandler
from tests.factories import make_user


@pytest.fixture
def handler(user_repo, passwords, tokens):
    return LoginCommandHandler(user_repo, passwords, tokens)


@pytest.mark.parametrize(
    "email, password",
    [(None, "pw"), ("jane@example.test", None), ("", "pw"), ("jane@example.test", "")],
)
async def test_missing_credentials(handler, user_repo, email, password):
    result = await handler(LoginCommand(email=email, password=password))

    assert result.status_code == 404
    assert result.body == {"success": False, "message": "Invalid email or password"}
    user_repo.get_by_email.assert_not_awaited()


async def test_unknown_email(handler):
    result = await handler(LoginCommand(email="nobody@example.test", password="pw"))

    assert result.status_code == 404
    assert result.body == {"success": False, "message": "Email is not registerd"}


async def test_wrong_password_is_200(handler, user_repo, tokens):
    user_repo.get_by_email.return_value = make_user(password="hashed::right")

    result = await handler(LoginCommand(email="jane@example.test", password="wrong"))

    assert result.status_code == 200
    assert result.body == {"success": False, "message": "Invalid Password"}
    tokens.issue.assert_not_called()


async def test_success_issues_token_for_user_id(handler, user_repo, tokens):
    user = make_user(password="hashed::right")
    user_repo.get_by_email.return_value = user

    result = await handler(LoginCommand(email="jane@example.test", password="right"))

    assert result.status_code == 200
    assert result.body["success"] is True
    assert result.body["message"] == "login successfully"
    assert result.body["token"] == "signed.jwt.token"
    assert result.body["user"] == user.to_public()
    tokens.issue.assert_called_once_with(user.id)


async def test_fault_is_generic(handler, user_repo):
    user_repo.get_by_email.side_effect = TimeoutError()

    result = await handler(LoginCommand(email="jane@example.test", password="pw"))

    assert result.status_code == 500
    assert result.body["message"] == "Error in login"
