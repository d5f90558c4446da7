import hashlib
import hmac

import pytest

from liboath.algorithms import HashAlgorithm
from liboath.digest import compile_hmac, hash_constructor
from liboath.errors import OTPRuntimeError


@pytest.mark.parametrize(
    ("algorithm", "const"),
    [
        (HashAlgorithm.SHA1, hashlib.sha1),
        (HashAlgorithm.SHA256, hashlib.sha256),
        (HashAlgorithm.SHA512, hashlib.sha512),
    ],
)
def test_hash_constructor(algorithm: HashAlgorithm, const) -> None:
    assert hash_constructor(algorithm) is const
    assert const().digest_size == algorithm.digest_size


@pytest.mark.parametrize("algorithm", list(HashAlgorithm))
@pytest.mark.parametrize(
    "key",
    [
        b"k",
        b"12345678901234567890",
        # longer than the sha1/sha256 block size, gets hashed first
        b"x" * 100,
        # longer than the sha512 block size too
        b"y" * 200,
    ],
)
def test_compile_hmac_matches_stdlib(algorithm: HashAlgorithm, key: bytes) -> None:
    name = algorithm.value.lower()
    keyed_hmac = compile_hmac(algorithm, key)
    for msg in (b"", b"\x00" * 8, b"message"):
        assert keyed_hmac(msg) == hmac.new(key, msg, name).digest()


def test_compile_hmac_is_reusable() -> None:
    keyed_hmac = compile_hmac(HashAlgorithm.SHA1, b"key")
    first = keyed_hmac(b"a")
    keyed_hmac(b"b")
    assert keyed_hmac(b"a") == first


def test_compile_hmac_rfc2202_vector() -> None:
    keyed_hmac = compile_hmac(HashAlgorithm.SHA1, b"Jefe")
    digest = keyed_hmac(b"what do ya want for nothing?")
    assert digest.hex() == "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"


@pytest.mark.parametrize(
    ("algorithm", "key"),
    [
        (HashAlgorithm.SHA1, b""),
        (HashAlgorithm.SHA256, ""),
        (HashAlgorithm.SHA512, None),
        ("sha1", b"key"),
        ("md5", b"key"),
    ],
)
def test_compile_hmac_setup_failure(algorithm, key) -> None:
    with pytest.raises(OTPRuntimeError):
        compile_hmac(algorithm, key)


def test_setup_failure_is_runtime_error() -> None:
    with pytest.raises(RuntimeError, match="key must not be empty"):
        compile_hmac(HashAlgorithm.SHA1, b"")
