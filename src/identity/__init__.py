"""Identity bounded context: accounts, sign-in and access guards."""
