"""liboath.generator -- HOTP dynamic truncation (:rfc:`4226` section 5.3)."""

from __future__ import annotations

import struct
from typing import Callable

from liboath._utils.const import DEFAULT_DIGITS
from liboath._utils.validation import validate_counter, validate_digits
from liboath.algorithms import HashAlgorithm
from liboath.digest import compile_hmac

__all__ = ["compile_generator", "compute_code", "normalize_code", "truncate"]


def truncate(digest: bytes, digits: int) -> str:
    """
    derive a zero-padded decimal code from an HMAC digest.

    the last nibble of the digest selects an offset, the 4 bytes at that
    offset are read big-endian with the top bit masked off,
    and the resulting 31-bit value is reduced modulo ``10**digits``.
    """
    offset = digest[-1] & 0x0F
    value = struct.unpack(">I", digest[offset : offset + 4])[0] & 0x7FFFFFFF
    return "%0*d" % (digits, value % 10**digits)


def compile_generator(
    key: bytes,
    *,
    algorithm: HashAlgorithm = HashAlgorithm.SHA1,
    digits: int = DEFAULT_DIGITS,
) -> Callable[[int], str]:
    """
    returns a function ``generate(counter) -> code`` bound to a specific key,
    so the HMAC key setup happens once when searching many counters.

    :raises OTPRuntimeError: if the HMAC can't be set up for **key**.
    """
    validate_digits(digits)
    keyed_hmac = compile_hmac(algorithm, key)

    def generate(counter: int) -> str:
        validate_counter(counter)
        digest = keyed_hmac(struct.pack(">Q", counter))
        # 0xF + 4 never runs off the end of a 20+ byte digest
        assert len(digest) == algorithm.digest_size, "digest_size: sanity check failed"
        return truncate(digest, digits)

    return generate


def compute_code(
    key: bytes,
    counter: int,
    *,
    algorithm: HashAlgorithm = HashAlgorithm.SHA1,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """
    Generate the OTP code for a raw key and counter value.
    This is the kernel shared by :class:`~liboath.hotp.HOTP` and :class:`~liboath.totp.TOTP`.

    :arg key: secret key as raw bytes.
    :arg counter: counter value, in range ``[0, 2**64 - 1]``.
    :param algorithm: hash used inside the HMAC.
    :param digits: length of the returned code.

    :raises OTPRuntimeError: if the HMAC can't be set up for **key**.
    :returns: decimal code, exactly **digits** characters long.

    Usage example::

        >>> compute_code(b"12345678901234567890", 0)
        '755224'
    """
    validate_counter(counter)
    return compile_generator(key, algorithm=algorithm, digits=digits)(counter)


def normalize_code(code: str | int, digits: int) -> str | None:
    """
    normalize a candidate code supplied by a client:
    strips surrounding whitespace and zero-pads integers.

    :returns:
        the code as a string of exactly **digits** decimal digits,
        or ``None`` if it can't possibly match.
    """
    if isinstance(code, int) and not isinstance(code, bool):
        if code < 0:
            return None
        code = "%0*d" % (digits, code)
    elif isinstance(code, str):
        code = code.strip()
    else:
        msg = f"code must be str or int, not {type(code).__name__}"
        raise TypeError(msg)
    if len(code) != digits or not (code.isascii() and code.isdigit()):
        return None
    return code
