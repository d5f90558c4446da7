"""liboath.hotp -- HMAC-based one-time passwords (:rfc:`4226`)."""

from __future__ import annotations

import dataclasses
import hmac

from liboath._logging import logger
from liboath._utils.const import DEFAULT_DIGITS, DEFAULT_LOOK_AHEAD, MAX_COUNTER
from liboath._utils.validation import check_serial, validate_counter
from liboath.algorithms import HashAlgorithm
from liboath.errors import OutOfSyncError
from liboath.otp import BaseOTP, decode_secret

__all__ = ["HOTP", "HotpCode", "HotpMatch"]


@dataclasses.dataclass(frozen=True)
class HotpCode:
    """Code returned by :meth:`HOTP.generate`."""

    #: decimal code, zero-padded to the configured number of digits
    code: str
    #: counter value used to generate the code
    counter: int

    @property
    def next_counter(self) -> int:
        """counter value the caller should store for the next code"""
        return self.counter + 1


@dataclasses.dataclass(frozen=True)
class HotpMatch:
    """
    Returned by :meth:`HOTP.verify` on a successful match.
    """

    #: HOTP counter value that matched the code
    counter: int
    #: counter value the caller expected the client to use
    expected_counter: int

    @property
    def next_counter(self) -> int:
        """new counter value the caller should persist"""
        return self.counter + 1

    @property
    def skipped(self) -> int:
        """
        How many steps between expected and matched counter values.
        Always >= 0; this is the resynchronization delta.
        """
        return self.counter - self.expected_counter

    @property
    def synchronized(self) -> bool:
        return self.skipped == 0

    @property
    def message(self) -> str:
        if self.synchronized:
            return "Code is valid for current counter"
        return f"Code is valid, counter resynchronized (skipped: {self.skipped})"


class HOTP(BaseOTP):
    """Helper for generating and verifying HOTP codes.

    The counter is caller-owned state: it is passed to every call,
    and the caller stores :attr:`HotpMatch.next_counter` after a successful
    verification.

    :param look_ahead:
       How many additional counter steps past the expected one :meth:`verify`
       searches. Defaults to ``10``.

    Usage example::

        >>> h = HOTP()
        >>> secret = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
        >>> h.generate(secret, 1).code
        '287082'
        >>> h.verify(secret, "359152", 0)
        HotpMatch(counter=2, expected_counter=0)
    """

    look_ahead: int

    def __init__(
        self,
        algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
        digits: int = DEFAULT_DIGITS,
        look_ahead: int = DEFAULT_LOOK_AHEAD,
    ) -> None:
        super().__init__(algorithm=algorithm, digits=digits)
        self.look_ahead = check_serial(look_ahead, "look_ahead")

    def generate(self, secret: str | bytes, counter: int) -> HotpCode:
        """
        Generate the HOTP code for the specified counter value.
        Doesn't modify or persist anything.

        :arg secret: base32 encoded secret.
        :arg counter: counter value to use.
        """
        validate_counter(counter)
        key = decode_secret(secret)
        return HotpCode(code=self._compile(key)(counter), counter=counter)

    def verify(
        self,
        secret: str | bytes,
        code: str | int,
        counter: int,
        look_ahead: int | None = None,
    ) -> HotpMatch:
        """
        Validate a HOTP code against the expected counter, resynchronizing forward.

        Counters in ``[counter, counter + look_ahead]`` are checked in ascending
        order and the first match wins. This is a forward-looking window only,
        as searching backwards would allow code reuse.

        :arg secret: base32 encoded secret.
        :arg code: code to validate, as string or integer.
        :arg counter: next counter value the client is expected to use.
        :param look_ahead: overrides the configured :attr:`look_ahead`.

        :raises OutOfSyncError:
            if no counter in the window matched, or the code is malformed.
        :returns: a :class:`HotpMatch`.
        """
        validate_counter(counter)
        if look_ahead is None:
            look_ahead = self.look_ahead
        else:
            check_serial(look_ahead, "look_ahead")
        generate = self._compile(decode_secret(secret))

        code = self.normalize_code(code)
        if code is None:
            raise OutOfSyncError(
                counter, look_ahead, f"Code must be exactly {self.digits} digits"
            )

        end = min(counter + look_ahead, MAX_COUNTER)
        candidate = counter
        while candidate <= end:
            if hmac.compare_digest(code, generate(candidate)):
                match = HotpMatch(counter=candidate, expected_counter=counter)
                if match.skipped:
                    logger.debug("hotp counter resynchronized by %d steps", match.skipped)
                return match
            candidate += 1
        logger.debug("hotp code did not match within look-ahead of %d", look_ahead)
        raise OutOfSyncError(counter, look_ahead)
