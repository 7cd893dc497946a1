from __future__ import annotations

import pytest

from groupfund.application.services.password_hashing import BcryptPasswordHasher


@pytest.fixture()
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


def test_hash_returns_bcrypt_hash_and_its_salt(hasher: BcryptPasswordHasher) -> None:
    hashed, salt = hasher.hash("password1")

    assert hashed.startswith("$2b$04$")
    assert len(hashed) == 60
    assert hashed.startswith(salt)


def test_hash_uses_fresh_salt(hasher: BcryptPasswordHasher) -> None:
    first, first_salt = hasher.hash("password1")
    second, second_salt = hasher.hash("password1")

    assert first != second
    assert first_salt != second_salt


def test_hash_empty_raises(hasher: BcryptPasswordHasher) -> None:
    with pytest.raises(ValueError, match="empty"):
        hasher.hash("")


def test_verify_correct_and_incorrect(hasher: BcryptPasswordHasher) -> None:
    hashed, _ = hasher.hash("password1")

    assert hasher.verify("password1", hashed) is True
    assert hasher.verify("password2", hashed) is False


@pytest.mark.parametrize(
    ("password", "hashed"),
    [("", "$2b$04$abc"), ("password1", ""), ("password1", "not-a-bcrypt-hash")],
)
def test_verify_never_raises_on_bad_input(
    hasher: BcryptPasswordHasher, password: str, hashed: str
) -> None:
    assert hasher.verify(password, hashed) is False


def test_multibyte_password_longer_than_bcrypt_limit(hasher: BcryptPasswordHasher) -> None:
    password = "😀" * 32  # 128 bytes

    hashed, _ = hasher.hash(password)

    assert hasher.verify(password, hashed) is True
