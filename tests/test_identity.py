import warnings

import jwt

from todo_app.core.config import JWT_SECRET_KEY
from todo_app.core.identity import decode_identity, encode_identity


def test_round_trip_keeps_id_and_username():
    identity = decode_identity(encode_identity(7, "keith"))
    assert identity.id == 7
    assert identity.username == "keith"
    assert not identity.is_anonymous


def test_missing_cookie_is_anonymous():
    assert decode_identity(None).is_anonymous
    assert decode_identity("").is_anonymous


def test_garbage_cookie_is_anonymous(caplog):
    assert decode_identity('{"id": 1, "username": "keith"}').is_anonymous
    assert "Identity cookie rejected" in caplog.text


def test_cookie_signed_with_another_key_is_anonymous():
    other_key = "another-secret-key-that-is-32-bytes-long"
    forged = jwt.encode({"sub": "1", "id": 1, "username": "keith"}, other_key, algorithm="HS256")
    assert decode_identity(forged).is_anonymous


def test_cookie_without_username_is_anonymous():
    token = jwt.encode({"sub": "1", "id": 1}, JWT_SECRET_KEY, algorithm="HS256")
    assert decode_identity(token).is_anonymous


def test_cookie_with_mismatched_subject_is_anonymous():
    token = jwt.encode({"sub": "2", "id": 1, "username": "keith"}, JWT_SECRET_KEY, algorithm="HS256")
    assert decode_identity(token).is_anonymous


def test_signing_key_is_long_enough_for_hs256():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        decode_identity(encode_identity(7, "keith"))
    assert caught == []
