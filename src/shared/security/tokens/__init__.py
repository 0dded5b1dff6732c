from .ports import TokenIssuerPort

__all__ = ["TokenIssuerPort"]
