import pytest

from liboath._secret import generate_secret
from liboath._utils.base32 import b32decode
from liboath.algorithms import HashAlgorithm


@pytest.mark.parametrize(
    ("algorithm", "size"),
    [
        (HashAlgorithm.SHA1, 20),
        (HashAlgorithm.SHA256, 32),
        (HashAlgorithm.SHA512, 64),
        ("sha-256", 32),
    ],
)
def test_default_size(algorithm: HashAlgorithm, size: int) -> None:
    secret = generate_secret(algorithm)
    assert "=" not in secret
    assert secret == secret.upper()
    assert len(b32decode(secret)) == size


def test_explicit_size() -> None:
    assert len(b32decode(generate_secret(size=10))) == 10
    assert len(b32decode(generate_secret(size=33))) == 33


def test_too_small() -> None:
    with pytest.raises(ValueError):
        generate_secret(size=9)


def test_random() -> None:
    assert generate_secret() != generate_secret()
