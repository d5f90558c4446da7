"""liboath.otp -- configuration & helpers shared by HOTP and TOTP."""

from __future__ import annotations

from typing import Callable
from warnings import warn

from liboath._utils.base32 import b32decode
from liboath._utils.const import DEFAULT_DIGITS, MIN_KEY_SIZE
from liboath._utils.validation import validate_digits
from liboath.algorithms import HashAlgorithm
from liboath.errors import OATHSecurityWarning
from liboath.generator import compile_generator, normalize_code

__all__ = ["BaseOTP", "decode_secret"]


def decode_secret(secret: str | bytes) -> bytes:
    """
    decode a base32 secret into key bytes.

    secrets shorter than :data:`MIN_KEY_SIZE` bytes still decode,
    so that existing tokens keep working, but issue a warning.

    :raises InvalidEncodingError: if **secret** isn't valid base32.
    """
    key = b32decode(secret)
    if 0 < len(key) < MIN_KEY_SIZE:
        warn(
            f"for security purposes, secret key should be >= {MIN_KEY_SIZE} bytes",
            OATHSecurityWarning,
            stacklevel=3,
        )
    return key


class BaseOTP:
    """
    Base class for :class:`~liboath.hotp.HOTP` and :class:`~liboath.totp.TOTP`.

    Instances only hold configuration. The secret is passed to every call,
    decoded, used, and dropped; counters are owned by the caller.

    :param algorithm:
        hash used inside the HMAC, as a :class:`HashAlgorithm` or a name
        such as ``"sha256"``. Defaults to SHA1.

    :param digits:
        number of digits in generated codes. Defaults to ``6``.
    """

    algorithm: HashAlgorithm
    digits: int

    def __init__(
        self,
        algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
        digits: int = DEFAULT_DIGITS,
    ) -> None:
        self.algorithm = HashAlgorithm.parse(algorithm)
        self.digits = validate_digits(digits)

    def _compile(self, key: bytes) -> Callable[[int], str]:
        return compile_generator(key, algorithm=self.algorithm, digits=self.digits)

    def normalize_code(self, code: str | int) -> str | None:
        return normalize_code(code, self.digits)
