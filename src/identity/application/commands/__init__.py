"""
Identity Application Commands
Write operations following CQRS pattern
"""
from src.identity.application.commands.forgot_password_command import (
    ForgotPasswordCommand,
    ForgotPasswordCommandHandler,
)
from src.identity.application.commands.login_command import (
    LoginCommand,
    LoginCommandHandler,
)
from src.identity.application.commands.register_user_command import (
    RegisterUserCommand,
    RegisterUserCommandHandler,
)
from src.identity.application.commands.update_profile_command import (
    UpdateProfileCommand,
    UpdateProfileCommandHandler,
)

__all__ = [
    "ForgotPasswordCommand",
    "ForgotPasswordCommandHandler",
    "LoginCommand",
    "LoginCommandHandler",
    "RegisterUserCommand",
    "RegisterUserCommandHandler",
    "UpdateProfileCommand",
    "UpdateProfileCommandHandler",
]
