from .ports import PasswordHasherPort

__all__ = ["PasswordHasherPort"]
