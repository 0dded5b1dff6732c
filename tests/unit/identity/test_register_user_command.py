import pytest

from src.identity.application.commands.register_user_command import (
    RegisterUserCommand,
    RegisterUserCommandHandler,
)
from tests.factories import make_user

VALID = {
    "name": "Jane Buyer",
    "email": "jane@example.test",
    "password": "pw",
    "phone": "5550100",
    "address": "1 Market Street",
    "answer": "blue",
}


@pytest.mark.parametrize(
    "missing, message",
    [
        ("name", "Name is Required"),
        ("email", "Email is Required"),
        ("password", "Password is Required"),
        ("phone", "Phone no is Required"),
        ("address", "Address is Required"),
        ("answer", "Answer is Required"),
    ],
)
async def test_missing_field_reported_without_insert(user_repo, passwords, missing, message):
    fields = dict(VALID, **{missing: ""})
    result = await RegisterUserCommandHandler(user_repo, passwords)(RegisterUserCommand(**fields))

    assert result.status_code == 200
    assert result.body["success"] is False
    assert result.body["message"] == message
    user_repo.get_by_email.assert_not_awaited()
    user_repo.create.assert_not_awaited()


async def test_first_missing_field_wins(user_repo, passwords):
    result = await RegisterUserCommandHandler(user_repo, passwords)(
        RegisterUserCommand(email="jane@example.test")
    )
    assert result.body == {"success": False, "message": "Name is Required", "error": "Name is Required"}


async def test_duplicate_email(user_repo, passwords):
    user_repo.get_by_email.return_value = make_user()

    result = await RegisterUserCommandHandler(user_repo, passwords)(RegisterUserCommand(**VALID))

    assert result.status_code == 200
    assert result.body == {"success": False, "message": "Already Register please login"}
    user_repo.create.assert_not_awaited()


async def test_creates_buyer_with_hashed_password(user_repo, passwords):
    user_repo.create.side_effect = lambda fields: make_user(**fields)

    result = await RegisterUserCommandHandler(user_repo, passwords)(RegisterUserCommand(**VALID))

    assert result.status_code == 201
    assert result.body["success"] is True
    assert result.body["message"] == "User Register Successfully"

    stored = user_repo.create.await_args.args[0]
    assert stored["password"] == "hashed::pw"
    assert stored["role"] == 0
    assert stored["answer"] == "blue"

    public = result.body["user"]
    assert public["email"] == "jane@example.test"
    assert "password" not in public
    assert "answer" not in public


async def test_short_password_is_accepted(user_repo, passwords):
    user_repo.create.side_effect = lambda fields: make_user(**fields)
    result = await RegisterUserCommandHandler(user_repo, passwords)(
        RegisterUserCommand(**dict(VALID, password="1"))
    )
    assert result.status_code == 201


async def test_store_fault_is_generic(user_repo, passwords):
    user_repo.get_by_email.side_effect = ConnectionError("db down")

    result = await RegisterUserCommandHandler(user_repo, passwords)(RegisterUserCommand(**VALID))

    assert result.status_code == 500
    assert result.body["message"] == "Errro in Registeration"
    assert result.body["error"] == {"code": "internal_error"}
