import base64
import contextlib
import warnings
from collections.abc import Iterator

#: secrets from the RFC 4226 / RFC 6238 reference code
RFC_KEY_BYTES_20 = b"12345678901234567890"
RFC_KEY_BYTES_32 = (RFC_KEY_BYTES_20 * 2)[:32]
RFC_KEY_BYTES_64 = (RFC_KEY_BYTES_20 * 4)[:64]

KEY3 = "S3JDVB7QD2R7JPXX"  # used in docstrings
KEY4 = "JBSWY3DPEHPK3PXP"  # from google keyuri spec


def b32(raw: bytes) -> str:
    """unpadded base32, as authenticator apps exchange secrets"""
    return base64.b32encode(raw).decode("ascii").rstrip("=")


RFC_SECRET_20 = b32(RFC_KEY_BYTES_20)
RFC_SECRET_32 = b32(RFC_KEY_BYTES_32)
RFC_SECRET_64 = b32(RFC_KEY_BYTES_64)


@contextlib.contextmanager
def no_warnings() -> Iterator[None]:
    with warnings.catch_warnings(record=True) as result:
        warnings.simplefilter("always")
        yield
    assert not result
