from .passwords import PasswordHasherPort
from .tokens import TokenIssuerPort

__all__ = ["PasswordHasherPort", "TokenIssuerPort"]
