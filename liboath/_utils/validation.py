from __future__ import annotations

from liboath._utils.const import MAX_COUNTER, MAX_DIGITS, MIN_DIGITS


def check_serial(value: int, param: str, min: int = 0, max: int | None = None) -> int:
    """
    check that a serial value (counter, period, window) is an integer within range.
    """
    # bool is an int subclass, but True/False as a counter is always a mistake
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"{param} must be an integer, not {type(value).__name__}"
        raise TypeError(msg)
    if value < min:
        msg = f"{param} must be >= {min}"
        raise ValueError(msg)
    if max is not None and value > max:
        msg = f"{param} must be <= {max}"
        raise ValueError(msg)
    return value


def validate_digits(digits: int) -> int:
    return check_serial(digits, "digits", min=MIN_DIGITS, max=MAX_DIGITS)


def validate_counter(counter: int) -> int:
    return check_serial(counter, "counter", max=MAX_COUNTER)


def validate_period(period: int) -> int:
    return check_serial(period, "period", min=1)


def validate_window(window: int) -> int:
    return check_serial(window, "window")
