"""
RFC 4648 base32 helpers for OTP secrets.

Secrets are exchanged without ``=`` padding (as in otpauth URIs),
so decoding restores the padding before handing off to :mod:`base64`.
"""

from __future__ import annotations

import base64
import binascii

from liboath.errors import InvalidEncodingError

__all__ = ["b32decode", "b32encode"]

_PAD = b"="

#: unpadded lengths (mod 8) that cannot be mapped to whole bytes
_INVALID_TAIL_SIZES = frozenset((1, 3, 6))


def b32encode(data: bytes) -> str:
    """
    encode bytes as upper-case base32, with padding stripped.
    """
    return base64.b32encode(data).rstrip(_PAD).decode("ascii")


def b32decode(text: str | bytes) -> bytes:
    """
    decode unpadded (or correctly padded) base32 text.
    lower-case input is accepted.

    :raises InvalidEncodingError:
        if the text contains characters outside the base32 alphabet,
        or has a length that cannot be mapped to whole bytes.
    """
    if isinstance(text, str):
        try:
            text = text.encode("ascii")
        except UnicodeEncodeError:
            raise InvalidEncodingError(
                "base32 secret should contain only ASCII characters"
            ) from None
    data = text.rstrip(_PAD)
    if len(data) % 8 in _INVALID_TAIL_SIZES:
        msg = f"invalid base32 length: {len(data)} characters"
        raise InvalidEncodingError(msg)
    # padding was either absent or had to be placed at the very end
    if len(text) != len(data) and len(text) % 8:
        raise InvalidEncodingError("incorrect base32 padding")
    pad = -len(data) % 8
    try:
        return base64.b32decode(data + _PAD * pad, casefold=True)
    except binascii.Error as err:
        msg = f"invalid base32 secret: {err}"
        raise InvalidEncodingError(msg) from err
