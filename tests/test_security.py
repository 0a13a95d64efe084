import pytest

from p3_academy.core.security import (
    create_access_token,
    create_token,
    get_password_hash,
    verify_password,
    verify_token,
)


def test_password_hash_roundtrip():
    hashed = get_password_hash("s3cret-pass")
    assert hashed != "s3cret-pass"
    assert verify_password("s3cret-pass", hashed)
    assert not verify_password("wrong-pass", hashed)


def test_access_token_carries_subject_and_roles():
    token = create_access_token(42, ["admin"])
    payload = verify_token(token)
    assert payload["sub"] == "42"
    assert payload["roles"] == ["admin"]
    assert payload["type"] == "access"


def test_verify_token_rejects_wrong_type():
    token = create_token(1, "refresh")
    with pytest.raises(ValueError):
        verify_token(token, token_type="access")


def test_verify_token_rejects_garbage():
    with pytest.raises(ValueError):
        verify_token("not-a-jwt")
