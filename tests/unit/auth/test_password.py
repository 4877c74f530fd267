"""Unit tests for BcryptPasswordHasher."""

from infrastructure.auth.password import BcryptPasswordHasher


def test_hash_is_salted_bcrypt():
    hasher = BcryptPasswordHasher(rounds=4)

    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first.startswith("$2b$04$")
    assert first != second
    assert "secret1" not in first


def test_verify_accepts_matching_password():
    hasher = BcryptPasswordHasher(rounds=4)

    assert hasher.verify("secret1", hasher.hash("secret1"))


def test_verify_rejects_wrong_password():
    hasher = BcryptPasswordHasher(rounds=4)

    assert not hasher.verify("secret2", hasher.hash("secret1"))


def test_verify_treats_malformed_hash_as_mismatch():
    assert not BcryptPasswordHasher(rounds=4).verify("secret1", "not-a-hash")
