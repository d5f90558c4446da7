"""
liboath.api -- plain function interface.

Each call decodes the secret, computes the result and keeps nothing;
HOTP counters are passed in and returned, never stored.
Entry points for other runtimes (desktop commands, web routes) should
wrap these functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from liboath._utils.const import (
    DEFAULT_DIGITS,
    DEFAULT_LOOK_AHEAD,
    DEFAULT_PERIOD,
    DEFAULT_WINDOW,
)
from liboath.algorithms import HashAlgorithm
from liboath.hotp import HOTP
from liboath.totp import TOTP

if TYPE_CHECKING:
    from liboath.drift import ValidationOutcome
    from liboath.hotp import HotpCode, HotpMatch
    from liboath.totp import TimeLike, TotpCode

__all__ = [
    "generate_code",
    "generate_hotp",
    "generate_totp",
    "validate_totp",
    "verify_hotp",
]


def generate_code(
    secret: str,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
    digits: int = DEFAULT_DIGITS,
    counter: int = 0,
) -> str:
    """generate the code for a base32 secret and explicit counter."""
    return HOTP(algorithm=algorithm, digits=digits).generate(secret, counter).code


def generate_hotp(
    secret: str,
    counter: int,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
    digits: int = DEFAULT_DIGITS,
) -> HotpCode:
    return HOTP(algorithm=algorithm, digits=digits).generate(secret, counter)


def verify_hotp(
    secret: str,
    code: str | int,
    counter: int,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
    digits: int = DEFAULT_DIGITS,
    look_ahead: int = DEFAULT_LOOK_AHEAD,
) -> HotpMatch:
    """
    verify a HOTP code, resynchronizing up to **look_ahead** counters forward.
    the caller should persist ``result.next_counter``.

    :raises OutOfSyncError: if no counter in the window matched.
    """
    otp = HOTP(algorithm=algorithm, digits=digits, look_ahead=look_ahead)
    return otp.verify(secret, code, counter)


def generate_totp(
    secret: str,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    timestamp: TimeLike = None,
) -> TotpCode:
    """generate the TOTP code for **timestamp** (defaults to now)."""
    return TOTP(algorithm=algorithm, digits=digits, period=period).generate(
        secret, timestamp
    )


def validate_totp(
    secret: str,
    code: str | int,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    window: int = DEFAULT_WINDOW,
    timestamp: TimeLike = None,
) -> ValidationOutcome:
    """
    validate a TOTP code against **timestamp** (defaults to now),
    checking **window** periods on each side.
    """
    otp = TOTP(algorithm=algorithm, digits=digits, period=period, window=window)
    return otp.validate(secret, code, timestamp)
