from mall_access.app.services.passwords import (
    TEMP_PASSWORD_ALPHABET,
    TEMP_PASSWORD_LENGTH,
    generate_temp_password,
    hash_password,
    password_policy_violation,
    verify_password,
)


def test_temp_password_uses_unambiguous_alphabet():
    password = generate_temp_password()

    assert len(password) == TEMP_PASSWORD_LENGTH
    assert all(c in TEMP_PASSWORD_ALPHABET for c in password)
    for look_alike in "0O1Il":
        assert look_alike not in TEMP_PASSWORD_ALPHABET


def test_hash_round_trip():
    password_hash = hash_password("Secret123")

    assert password_hash.startswith("$2")
    assert verify_password("Secret123", password_hash)
    assert not verify_password("secret123", password_hash)


def test_verify_rejects_malformed_hash():
    assert verify_password("Secret123", "not-a-bcrypt-hash") is False


def test_password_policy():
    assert password_policy_violation("Secret123") is None
    assert "8 characters" in password_policy_violation("Se1")
    assert "uppercase" in password_policy_violation("secret123")
    assert "lowercase" in password_policy_violation("SECRET123")
    assert "number" in password_policy_violation("SecretSecret")
