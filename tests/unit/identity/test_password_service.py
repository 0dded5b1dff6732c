from src.identity.infrastructure.adapters.password_service import PasswordService


def test_hash_is_salted_and_verifies():
    svc = PasswordService()
    first = svc.hash_password("secret1")
    second = svc.hash_password("secret1")

    assert first != second
    assert first != "secret1"
    assert first.startswith("$argon2id$")
    assert svc.compare_password("secret1", first)
    assert svc.compare_password("secret1", second)


def test_compare_rejects_other_passwords():
    svc = PasswordService()
    digest = svc.hash_password("secret1")
    assert svc.compare_password("secret2", digest) is False
    assert svc.compare_password("", digest) is False


def test_compare_malformed_digest_is_false():
    svc = PasswordService()
    assert svc.compare_password("secret1", "not-a-hash") is False
    assert svc.compare_password("secret1", "") is False


def test_empty_password_still_hashes():
    svc = PasswordService()
    digest = svc.hash_password("")
    assert svc.compare_password("", digest)
