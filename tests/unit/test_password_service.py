from __future__ import annotations

from app.services.password_service import hash_password, verify_password
from app.services.session_service import GUEST_PASSWORD_PLACEHOLDER


def test_hash_is_salted_and_verifies() -> None:
    first = hash_password("correct horse")
    second = hash_password("correct horse")

    assert first != "correct horse"
    assert first != second
    assert verify_password("correct horse", first)
    assert verify_password("correct horse", second)


def test_wrong_password_does_not_verify() -> None:
    assert not verify_password("wrong", hash_password("right"))


def test_placeholder_and_missing_hashes_never_verify() -> None:
    assert not verify_password(GUEST_PASSWORD_PLACEHOLDER, GUEST_PASSWORD_PLACEHOLDER)
    assert not verify_password("anything", None)
    assert not verify_password("", hash_password("x"))


def test_long_password_is_accepted() -> None:
    password = "p" * 100
    assert verify_password(password, hash_password(password))
