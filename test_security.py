"""Password hashing and the signed session cookie."""

from datetime import datetime, timedelta

from app.core.security import (
    create_session_cookie,
    decode_session_cookie,
    get_password_hash,
    verify_password,
)


def test_long_passwords_are_not_truncated():
    prefix = "a" * 72
    hashed = get_password_hash(prefix + "-birinci")

    assert hashed.startswith("$pbkdf2-sha256$")
    assert verify_password(prefix + "-birinci", hashed)
    assert not verify_password(prefix + "-ikinci", hashed)
    assert not verify_password(prefix, hashed)


def test_non_ascii_passwords_round_trip():
    hashed = get_password_hash("şifreÇĞÜ" * 20)

    assert verify_password("şifreÇĞÜ" * 20, hashed)
    assert not verify_password("şifreÇĞÜ" * 19, hashed)


def test_missing_or_unknown_hash_never_verifies():
    assert not verify_password("Sifre1234!", None)
    assert not verify_password("Sifre1234!", "")
    assert not verify_password("Sifre1234!", "not-a-hash")


def test_session_cookie_carries_token():
    cookie = create_session_cookie("opaque-token", datetime.utcnow() + timedelta(days=1))

    assert decode_session_cookie(cookie) == "opaque-token"
    assert decode_session_cookie(cookie + "x") is None


def test_expired_session_cookie_is_rejected():
    cookie = create_session_cookie("opaque-token", datetime.utcnow() - timedelta(minutes=1))

    assert decode_session_cookie(cookie) is None
