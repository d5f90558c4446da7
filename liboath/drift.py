"""
liboath.drift -- drift tolerant TOTP validation.

The current time window is checked first, then windows at increasing
distance; at each distance the past window is checked before the future one.
"""

from __future__ import annotations

import dataclasses
import hmac
from typing import TYPE_CHECKING

from liboath._logging import logger
from liboath._utils.const import MAX_COUNTER
from liboath._utils.validation import validate_counter, validate_window
from liboath.generator import compile_generator, normalize_code

if TYPE_CHECKING:
    from collections.abc import Iterator

    from liboath.algorithms import HashAlgorithm

__all__ = ["ValidationOutcome", "iter_offsets", "search_windows"]


@dataclasses.dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of a TOTP validation. A non-matching code is not an error,
    it is reported with ``is_valid=False``; the object's truth value
    follows :attr:`is_valid`.
    """

    is_valid: bool
    #: number of windows between the matched and the current one (0 if no match)
    offset: int
    #: window (time counter) that matched, or the current one if no match
    used_window: int
    current_window: int
    message: str

    def __bool__(self) -> bool:
        return self.is_valid


def iter_offsets(window: int) -> Iterator[int]:
    """yield window offsets in search order: ``0, -1, +1, -2, +2, ...``"""
    yield 0
    for offset in range(1, window + 1):
        yield -offset
        yield offset


def _describe(offset: int) -> str:
    if offset == 0:
        return "Code is valid for current time window"
    elif offset < 0:
        return f"Code is valid for past time window (offset: {offset})"
    else:
        return f"Code is valid for future time window (offset: +{offset})"


def search_windows(
    key: bytes,
    code: str | int,
    *,
    current_window: int,
    window: int,
    algorithm: HashAlgorithm,
    digits: int,
) -> ValidationOutcome:
    """
    Search the current window and **window** neighbors on each side for **code**.

    At most ``2 * window + 1`` codes are generated, stopping at the first match.
    Windows before 0 or past the 64-bit counter range are skipped.

    :arg key: secret key as raw bytes.
    :arg code: candidate code, as string or integer.
    :param current_window: time counter for the validation timestamp.
    :param window: how many windows to check on each side.

    :raises OTPRuntimeError: if the HMAC can't be set up for **key**.
    """
    validate_counter(current_window)
    validate_window(window)
    generate = compile_generator(key, algorithm=algorithm, digits=digits)

    candidate = normalize_code(code, digits)
    if candidate is None:
        return ValidationOutcome(
            is_valid=False,
            offset=0,
            used_window=current_window,
            current_window=current_window,
            message=f"Code must be exactly {digits} digits",
        )

    for offset in iter_offsets(window):
        counter = current_window + offset
        if counter < 0 or counter > MAX_COUNTER:
            continue
        if hmac.compare_digest(candidate, generate(counter)):
            if offset:
                logger.debug("totp code matched at window offset %+d", offset)
            return ValidationOutcome(
                is_valid=True,
                offset=offset,
                used_window=counter,
                current_window=current_window,
                message=_describe(offset),
            )

    logger.debug("totp code did not match within %d windows", window)
    return ValidationOutcome(
        is_valid=False,
        offset=0,
        used_window=current_window,
        current_window=current_window,
        message="Code is not valid for any checked time window",
    )
