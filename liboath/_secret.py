from __future__ import annotations

import secrets

from liboath._utils.base32 import b32encode
from liboath._utils.const import MIN_KEY_SIZE
from liboath.algorithms import HashAlgorithm

__all__ = ["generate_secret"]


def generate_secret(
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
    size: int | None = None,
) -> str:
    """
    generate a new random secret, as an unpadded base32 string.

    :param algorithm: the size defaults to this hash's digest size, per :rfc:`6238` section 5.1.
    :param size: number of random bytes.
    """
    algorithm = HashAlgorithm.parse(algorithm)
    if size is None:
        size = algorithm.digest_size
    if size < MIN_KEY_SIZE:
        msg = f"secret size must be >= {MIN_KEY_SIZE} bytes"
        raise ValueError(msg)
    return b32encode(secrets.token_bytes(size))
