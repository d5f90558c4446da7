"""liboath.totp -- time-based one-time passwords (:rfc:`6238`)."""

from __future__ import annotations

import calendar
import dataclasses
import time as _time
from datetime import datetime
from typing import Callable, Union

from liboath._utils.const import DEFAULT_DIGITS, DEFAULT_PERIOD, DEFAULT_WINDOW
from liboath._utils.validation import validate_period, validate_window
from liboath.algorithms import HashAlgorithm
from liboath.drift import ValidationOutcome, search_windows
from liboath.errors import OTPRuntimeError
from liboath.otp import BaseOTP, decode_secret

__all__ = ["TOTP", "TotpCode", "TimeLike"]

TimeLike = Union[int, float, datetime, None]


@dataclasses.dataclass(frozen=True)
class TotpCode:
    """
    Code returned by :meth:`TOTP.generate`.
    """

    #: decimal code, zero-padded to the configured number of digits
    code: str
    #: time counter (window) used to generate the code: ``timestamp // period``
    counter: int
    #: unix timestamp the code was generated for
    timestamp: int
    period: int

    @property
    def time_used(self) -> int:
        """alias of :attr:`counter`, the time window index"""
        return self.counter

    @property
    def time_remaining(self) -> int:
        """seconds left in the window, between 1 and :attr:`period`"""
        return self.period - self.timestamp % self.period

    @property
    def expire_time(self) -> int:
        """timestamp marking the end of the window"""
        return (self.counter + 1) * self.period


class TOTP(BaseOTP):
    """Helper for generating and validating TOTP codes.

    :param period:
        The time-step period to use, in integer seconds. Defaults to ``30``.

    :param window:
        How many periods before & after the current one :meth:`validate`
        searches. Defaults to ``1``.

    :param now:
        Optional callable returning the current unix time.
        Defaults to :func:`time.time`; mainly useful for unit-testing.

    .. warning::

        Overriding the default values for ``digits``, ``period``, or ``algorithm``
        may cause problems with some authenticator apps, which have these
        defaults hardcoded.

    Usage example::

        >>> totp = TOTP()
        >>> totp.generate("S3JDVB7QD2R7JPXX", 1419622739).code
        '897212'
        >>> totp.validate("S3JDVB7QD2R7JPXX", "000492", 1419622739).offset
        -1
    """

    period: int
    window: int

    def __init__(
        self,
        algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
        digits: int = DEFAULT_DIGITS,
        period: int = DEFAULT_PERIOD,
        window: int = DEFAULT_WINDOW,
        now: Callable[[], float] = _time.time,
    ) -> None:
        super().__init__(algorithm=algorithm, digits=digits)
        self.period = validate_period(period)
        self.window = validate_window(window)
        self.now = now

    def normalize_time(self, time: TimeLike) -> int:
        """
        Normalize time value to unix epoch seconds.

        :arg time:
            Can be ``None``, :class:`!datetime`,
            or unix epoch timestamp as :class:`!float` or :class:`!int`.
            If ``None``, reads the clock. Naive datetimes are treated as UTC.

        :raises ValueError: if an explicit time is before the epoch.
        :raises OTPRuntimeError: if the clock can't be read.
        """
        if time is None:
            return self._read_clock()
        if isinstance(time, bool):
            msg = "time must be int, float, or datetime, not bool"
            raise TypeError(msg)
        if isinstance(time, int):
            value = time
        elif isinstance(time, float):
            value = int(time)
        elif isinstance(time, datetime):
            # NOTE: utctimetuple() assumes naive datetimes are in UTC,
            #       and drops microseconds.
            value = calendar.timegm(time.utctimetuple())
        else:
            msg = f"time must be int, float, or datetime, not {type(time).__name__}"
            raise TypeError(msg)
        if value < 0:
            raise ValueError("time must be >= 0")
        return value

    def _read_clock(self) -> int:
        try:
            value = int(self.now())
        except (OSError, OverflowError, ValueError) as err:
            msg = f"system clock could not be read: {err}"
            raise OTPRuntimeError(msg) from err
        if value < 0:
            msg = f"system clock reports time before the epoch ({value})"
            raise OTPRuntimeError(msg)
        return value

    def time_to_counter(self, time: TimeLike) -> int:
        """convert a timestamp to the time counter using :attr:`period`."""
        return self.normalize_time(time) // self.period

    def generate(self, secret: str | bytes, time: TimeLike = None) -> TotpCode:
        """
        Generate the code for the specified time.

        :arg secret: base32 encoded secret.
        :arg time: timestamp, see :meth:`normalize_time`. Defaults to now.
        """
        key = decode_secret(secret)
        timestamp = self.normalize_time(time)
        counter = timestamp // self.period
        return TotpCode(
            code=self._compile(key)(counter),
            counter=counter,
            timestamp=timestamp,
            period=self.period,
        )

    def validate(
        self,
        secret: str | bytes,
        code: str | int,
        time: TimeLike = None,
        window: int | None = None,
    ) -> ValidationOutcome:
        """
        Validate a code against the specified time, tolerating clock drift.

        The current window is checked first, then ``1 .. window`` periods
        away, the past window before the future one at each distance.
        A non-matching or malformed code is reported via
        :attr:`ValidationOutcome.is_valid`, never raised.

        :arg secret: base32 encoded secret.
        :arg code: candidate code, as string or integer.
        :arg time:
            timestamp the code was received at, see :meth:`normalize_time`.
            Defaults to now.
        :param window: overrides the configured :attr:`window`.

        :raises InvalidEncodingError: if the secret isn't valid base32.
        :raises OTPRuntimeError: if the HMAC or the clock fails.
        """
        if window is None:
            window = self.window
        key = decode_secret(secret)
        current_window = self.time_to_counter(time)
        return search_windows(
            key,
            code,
            current_window=current_window,
            window=window,
            algorithm=self.algorithm,
            digits=self.digits,
        )
