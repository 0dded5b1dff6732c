import pytest

from src.identity.application.commands.forgot_password_command import (
    ForgotPasswordCommand,
    ForgotPasswordCommandHandler,
)
from tests.factories import make_user


@pytest.fixture
def handler(user_repo, passwords):
    return ForgotPasswordCommandHandler(user_repo, passwords)


@pytest.mark.parametrize(
    "fields, message",
    [
        ({"answer": "blue", "new_password": "n"}, "Email is required"),
        ({"email": "jane@example.test", "new_password": "n"}, "Answer is required"),
        ({"email": "jane@example.test", "answer": "blue"}, "New Password is required"),
        ({}, "Email is required"),
    ],
)
async def test_required_fields(handler, user_repo, fields, message):
    result = await handler(ForgotPasswordCommand(**fields))

    assert result.status_code == 400
    assert result.body == {"success": False, "message": message}
    user_repo.get_by_email_and_answer.assert_not_awaited()


async def test_wrong_email_or_answer_look_the_same(handler, user_repo):
    first = await handler(ForgotPasswordCommand(email="nobody@x.test", answer="blue", new_password="n"))
    second = await handler(ForgotPasswordCommand(email="jane@example.test", answer="red", new_password="n"))

    assert first == second
    assert first.status_code == 404
    assert first.body == {"success": False, "message": "Wrong Email Or Answer"}
    user_repo.update_by_id.assert_not_awaited()


async def test_reset_writes_only_the_password(handler, user_repo):
    user = make_user()
    user_repo.get_by_email_and_answer.return_value = user

    result = await handler(
        ForgotPasswordCommand(email="jane@example.test", answer="blue", new_password="fresh")
    )

    assert result.status_code == 200
    assert result.body == {"success": True, "message": "Password Reset Successfully"}
    user_repo.get_by_email_and_answer.assert_awaited_once_with("jane@example.test", "blue")
    user_repo.update_by_id.assert_awaited_once_with(user.id, {"password": "hashed::fresh"})


async def test_fault_is_generic(handler, user_repo):
    user_repo.get_by_email_and_answer.return_value = make_user()
    user_repo.update_by_id.side_effect = RuntimeError("write failed")

    result = await handler(
        ForgotPasswordCommand(email="jane@example.test", answer="blue", new_password="fresh")
    )

    assert result.status_code == 500
    assert result.body["message"] == "Something went wrong"
