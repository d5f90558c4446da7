from __future__ import annotations

__all__ = [
    "OATHError",
    "InvalidEncodingError",
    "OTPRuntimeError",
    "OutOfSyncError",
    "OATHWarning",
    "OATHSecurityWarning",
    "OATHRuntimeWarning",
]


class OATHError(Exception):
    """Base class for all errors raised by liboath."""


class InvalidEncodingError(OATHError, ValueError):
    """Secret is not valid unpadded RFC 4648 base32."""


class OTPRuntimeError(OATHError, RuntimeError):
    """
    Keyed-hash setup failed (empty key, unknown algorithm),
    or the system clock could not be read.
    """


class OutOfSyncError(OATHError):
    """
    Raised by HOTP verification when no counter within
    ``[counter, counter + look_ahead]`` matched the code.
    """

    def __init__(self, counter: int, look_ahead: int, msg: str | None = None) -> None:
        self.counter = counter
        self.look_ahead = look_ahead
        if msg is None:
            msg = (
                f"Code did not match any counter in range "
                f"[{counter}, {counter + look_ahead}]"
            )
        super().__init__(msg)


class OATHWarning(UserWarning):
    """Base class for warnings issued by liboath."""


class OATHSecurityWarning(OATHWarning):
    """Issued when a weak configuration is used, e.g. a very short secret."""


class OATHRuntimeWarning(OATHWarning):
    """Issued when unexpected input is encountered and ignored."""
