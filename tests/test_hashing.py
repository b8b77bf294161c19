from __future__ import annotations

import pytest

from argonbase.config import HashParams
from argonbase.errors import HashFailure
from argonbase.hashing import HashRequest, argon2id_supported, hash_digest

requires_argon2 = pytest.mark.skipif(not argon2id_supported(), reason="Argon2id unavailable in this OpenSSL build")

# RFC 9106 section 5.3
RFC_TAG = bytes.fromhex("0d640df58d78766c08c037a34a8b53c9d01ef0452d75b65eb52520e96b01e659")


def _rfc_request() -> HashRequest:
    return HashRequest(
        message=b"\x01" * 32,
        nonce=b"\x02" * 16,
        secret=b"\x03" * 8,
        associated_data=b"\x04" * 12,
        params=HashParams(tag_length=32, iterations=3, parallelism=4, memory_kib=32),
    )


@requires_argon2
def test_rfc9106_vector():
    assert hash_digest(_rfc_request()) == RFC_TAG


@requires_argon2
def test_tag_length_honoured():
    req = HashRequest(message=b"msg", nonce=b"n" * 8, params=HashParams(tag_length=7, memory_kib=64))
    assert len(hash_digest(req)) == 7


@requires_argon2
def test_deterministic_and_nonce_sensitive():
    p = HashParams(tag_length=16, iterations=1, memory_kib=64)
    a = hash_digest(HashRequest(message=b"m", nonce=b"nonce-01", params=p))
    b = hash_digest(HashRequest(message=b"m", nonce=b"nonce-01", params=p))
    c = hash_digest(HashRequest(message=b"m", nonce=b"nonce-02", params=p))
    assert a == b
    assert a != c


def test_short_nonce_is_hash_failure():
    with pytest.raises(HashFailure) as ei:
        hash_digest(HashRequest(message=b"m", nonce=b"short"))
    assert ei.value.stage == "hash"


@pytest.mark.parametrize(
    "params",
    [
        HashParams(tag_length=3),
        HashParams(iterations=0),
        HashParams(parallelism=0),
        HashParams(parallelism=2, memory_kib=15),
    ],
)
def test_invalid_params_are_hash_failures(params: HashParams):
    with pytest.raises(HashFailure):
        hash_digest(HashRequest(message=b"m", nonce=b"n" * 8, params=params))


def test_repr_hides_inputs():
    r = repr(HashRequest(message=b"top secret", nonce=b"n" * 8, secret=b"hunter2"))
    assert "top secret" not in r
    assert "hunter2" not in r
    assert "<10 bytes>" in r
