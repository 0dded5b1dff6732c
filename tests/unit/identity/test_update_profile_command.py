import uuid

import pytest

from src.identity.application.commands.update_profile_command import (
    UpdateProfileCommand,
    UpdateProfileCommandHandler,
)
from tests.factories import make_user


@pytest.fixture
def stored():
    return make_user(password="hashed::old")


@pytest.fixture
def handler(user_repo, passwords, stored):
    user_repo.get_by_id.return_value = stored
    user_repo.update_by_id.side_effect = lambda user_id, values, return_new=False: make_user(
        id=user_id, **values
    )
    return UpdateProfileCommandHandler(user_repo, passwords)


async def test_short_password_rejected_before_store(handler, user_repo, stored):
    result = await handler(UpdateProfileCommand(password="abc", issued_by=stored.id))

    assert result.status_code == 200
    assert result.body == {
        "success": False,
        "error": "Passsword is required and 6 character long",
        "message": "Passsword is required and 6 character long",
    }
    user_repo.get_by_id.assert_not_awaited()
    user_repo.update_by_id.assert_not_awaited()


async def test_only_supplied_fields_change(handler, user_repo, stored):
    result = await handler(UpdateProfileCommand(phone="5559999", issued_by=stored.id))

    assert result.status_code == 200
    assert result.body["message"] == "Profile Updated SUccessfully"
    user_repo.update_by_id.assert_awaited_once_with(
        stored.id,
        {
            "name": stored.name,
            "password": "hashed::old",
            "phone": "5559999",
            "address": stored.address,
        },
        return_new=True,
    )
    assert result.body["updatedUser"]["phone"] == "5559999"
    assert result.body["updatedUser"]["name"] == stored.name


async def test_new_password_is_hashed(handler, user_repo, stored, passwords):
    await handler(UpdateProfileCommand(password="longenough", issued_by=stored.id))

    values = user_repo.update_by_id.await_args.args[1]
    assert values["password"] == "hashed::longenough"
    passwords.hash_password.assert_called_once_with("longenough")


async def test_empty_password_keeps_old_hash(handler, user_repo, stored, passwords):
    await handler(UpdateProfileCommand(password="", name="New Name", issued_by=stored.id))

    values = user_repo.update_by_id.await_args.args[1]
    assert values["password"] == "hashed::old"
    assert values["name"] == "New Name"
    passwords.hash_password.assert_not_called()


async def test_email_is_never_written(handler, user_repo, stored):
    await handler(UpdateProfileCommand(email="other@example.test", issued_by=stored.id))

    values = user_repo.update_by_id.await_args.args[1]
    assert "email" not in values


async def test_custom_minimum_length(user_repo, passwords, stored):
    handler = UpdateProfileCommandHandler(user_repo, passwords, min_password_length=10)
    result = await handler(UpdateProfileCommand(password="123456789", issued_by=stored.id))
    assert result.body["success"] is False


async def test_vanished_caller_is_generic_400(handler, user_repo):
    user_repo.get_by_id.return_value = None

    result = await handler(UpdateProfileCommand(name="x", issued_by=uuid.uuid4()))

    assert result.status_code == 400
    assert result.body["message"] == "Error WHile Update profile"
    user_repo.update_by_id.assert_not_awaited()
