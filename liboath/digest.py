"""liboath.digest -- HMAC primitive keyed for OTP generation."""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING, Callable, Protocol

import typing_extensions

from liboath.algorithms import HashAlgorithm
from liboath.errors import OTPRuntimeError

if TYPE_CHECKING:
    from typing_extensions import Buffer, Self

__all__ = ["compile_hmac", "hash_constructor"]


class HashLike(Protocol):
    """The subset of hashlib objects used to build an HMAC."""

    @property
    def digest_size(self) -> int: ...

    @property
    def block_size(self) -> int: ...

    def copy(self) -> Self: ...

    def digest(self) -> bytes: ...

    def update(self, data: Buffer, /) -> None: ...


HashConstructor = Callable[[bytes], HashLike]

_TRANS_5C = bytes((x ^ 0x5C) for x in range(256))
_TRANS_36 = bytes((x ^ 0x36) for x in range(256))


def hash_constructor(algorithm: HashAlgorithm) -> HashConstructor:
    """return the hashlib constructor for **algorithm**."""
    if algorithm is HashAlgorithm.SHA1:
        return hashlib.sha1
    elif algorithm is HashAlgorithm.SHA256:
        return hashlib.sha256
    elif algorithm is HashAlgorithm.SHA512:
        return hashlib.sha512
    typing_extensions.assert_never(algorithm)


def compile_hmac(algorithm: HashAlgorithm, key: bytes) -> Callable[[bytes], bytes]:
    """
    Returns an HMAC function hardcoded with a specific hash & key,
    with the signature ``hmac(msg) -> digest``.

    The inner & outer padded states (:rfc:`2104`) are computed once,
    so the returned function only has to copy & finalize them.

    :raises OTPRuntimeError:
        if the key is empty or not bytes, or **algorithm** isn't a :class:`HashAlgorithm`.
    """
    if not isinstance(algorithm, HashAlgorithm):
        msg = f"HMAC setup failed: unsupported algorithm {algorithm!r}"
        raise OTPRuntimeError(msg)
    if not isinstance(key, (bytes, bytearray)):
        msg = f"HMAC setup failed: key must be bytes, not {type(key).__name__}"
        raise OTPRuntimeError(msg)
    if not key:
        raise OTPRuntimeError("HMAC setup failed: key must not be empty")

    const = hash_constructor(algorithm)
    block_size = const(b"").block_size

    # prepare key
    key = bytes(key)
    if len(key) > block_size:
        key = const(key).digest()
    key = key.ljust(block_size, b"\x00")

    # create pre-initialized hash states
    _inner_copy = const(key.translate(_TRANS_36)).copy
    _outer_copy = const(key.translate(_TRANS_5C)).copy

    def hmac(msg: bytes) -> bytes:
        """generated by compile_hmac()"""
        inner = _inner_copy()
        inner.update(msg)
        outer = _outer_copy()
        outer.update(inner.digest())
        return outer.digest()

    return hmac
