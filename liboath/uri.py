"""
liboath.uri -- otpauth:// provisioning URIs.

These URIs are what authenticator apps consume (usually via a QR code);
rendering the QR code itself is left to libraries such as ``qrcode``.
"""

from __future__ import annotations

import dataclasses
from typing import Literal
from urllib.parse import parse_qsl, quote, unquote, urlparse
from warnings import warn

from liboath._utils.base32 import b32decode
from liboath._utils.const import DEFAULT_DIGITS, DEFAULT_PERIOD
from liboath._utils.validation import validate_counter, validate_digits, validate_period
from liboath.algorithms import HashAlgorithm
from liboath.errors import OATHRuntimeWarning

__all__ = ["OTPAuthURI", "build_uri", "parse_uri"]

OTPType = Literal["totp", "hotp"]

_KNOWN_PARAMS = frozenset(
    ("secret", "issuer", "algorithm", "digits", "period", "counter", "image")
)


def _check_label(value: str, param: str) -> None:
    """check that label/issuer doesn't contain chars forbidden by the KeyURI format"""
    if ":" in value:
        msg = f"{param} may not contain ':'"
        raise ValueError(msg)


def _quote(value: str) -> str:
    # NOTE: not using urlencode() because it encodes ' ' as '+',
    #       and not every authenticator app decodes that.
    return quote(value, safe="")


@dataclasses.dataclass(frozen=True)
class OTPAuthURI:
    """Parsed contents of an ``otpauth://`` URI."""

    type: OTPType
    secret: str
    account: str
    issuer: str | None = None
    algorithm: HashAlgorithm = HashAlgorithm.SHA1
    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_PERIOD
    counter: int | None = None
    image: str | None = None


def build_uri(
    secret: str,
    account: str,
    issuer: str,
    *,
    type: OTPType = "totp",
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    counter: int | None = None,
    image: str | None = None,
    issuer_prefix: bool = False,
) -> str:
    """
    Render key and configuration into an ``otpauth://`` URI.

    All parameters are always written, since some authenticator apps
    ignore the documented defaults.

    :arg secret: unpadded base32 secret.
    :arg account: account name, e.g. ``"alice@example.org"``. May not contain ``:``.
    :arg issuer: service name. May not contain ``:``.
    :param type: ``"totp"`` (the default) or ``"hotp"``.
    :param counter: initial counter, required for ``"hotp"``.
    :param image: optional logo url, understood by some apps.
    :param issuer_prefix: if true, the label is rendered as ``issuer:account``.

    Usage example::

        >>> build_uri("JBSWY3DPEHPK3PXP", "alice@example.org", "Example")
        'otpauth://totp/alice%40example.org?secret=JBSWY3DPEHPK3PXP&issuer=Example&algorithm=SHA1&digits=6&period=30'
    """
    if not secret:
        raise ValueError("secret must not be empty")
    b32decode(secret)
    _check_label(account, "account")
    _check_label(issuer, "issuer")
    algorithm = HashAlgorithm.parse(algorithm)
    validate_digits(digits)

    label = f"{issuer}:{account}" if issuer_prefix else account
    args = [
        ("secret", secret.rstrip("=").upper()),
        ("issuer", _quote(issuer)),
        ("algorithm", algorithm.value),
        ("digits", str(digits)),
    ]
    if type == "totp":
        args.append(("period", str(validate_period(period))))
    elif type == "hotp":
        if counter is None:
            raise TypeError("hotp uris require a 'counter'")
        args.append(("counter", str(validate_counter(counter))))
    else:
        msg = f"unknown OTP type: {type!r}"
        raise ValueError(msg)
    if image:
        args.append(("image", _quote(image)))

    argstr = "&".join(f"{key}={value}" for key, value in args)
    return f"otpauth://{type}/{_quote(label)}?{argstr}"


def _uri_error(reason: str) -> ValueError:
    return ValueError(f"Invalid otpauth uri: {reason}")


def _parse_int(source: str, param: str) -> int:
    try:
        return int(source)
    except ValueError:
        raise _uri_error(f"malformed {param!r} parameter") from None


def parse_uri(uri: str) -> OTPAuthURI:
    """
    Parse an ``otpauth://`` URI, such as returned by :func:`build_uri`.

    :raises ValueError: if the uri cannot be parsed or contains errors.
    :raises InvalidEncodingError: if the secret isn't valid base32.
    """
    result = urlparse(uri.strip())
    if result.scheme != "otpauth":
        raise _uri_error("wrong uri scheme")
    otp_type = result.netloc.lower()
    if otp_type not in ("totp", "hotp"):
        raise _uri_error("unknown OTP type")

    # decode label from uri path
    label = result.path
    if not (label.startswith("/") and len(label) > 1):
        raise _uri_error("missing label")
    label = unquote(label[1:])

    # extract issuer prefix
    prefix = None
    if ":" in label:
        try:
            prefix, label = label.split(":")
        except ValueError:  # too many ":"
            raise _uri_error("malformed label") from None
        prefix = prefix.strip()
    account = label.strip()

    params: dict[str, str] = {}
    for key, value in parse_qsl(result.query):
        if key in params:
            raise _uri_error(f"duplicate parameter ({key!r})")
        params[key] = value

    extra = set(params) - _KNOWN_PARAMS
    if extra:
        # malicious uri, deviation from the format, or newer revision of it
        warn(
            f"unexpected parameters encountered in otp uri: {sorted(extra)!r}",
            OATHRuntimeWarning,
            stacklevel=2,
        )

    secret = params.get("secret")
    if not secret:
        raise _uri_error("missing 'secret' parameter")
    b32decode(secret)

    issuer = params.get("issuer") or prefix
    if prefix and issuer != prefix:
        raise _uri_error("conflicting issuer identifiers")

    kwds: dict = {}
    if "algorithm" in params:
        try:
            kwds["algorithm"] = HashAlgorithm.parse(params["algorithm"])
        except ValueError as err:
            raise _uri_error(str(err)) from None
    if "digits" in params:
        kwds["digits"] = validate_digits(_parse_int(params["digits"], "digits"))
    if "period" in params:
        kwds["period"] = validate_period(_parse_int(params["period"], "period"))
    if otp_type == "hotp":
        if "counter" not in params:
            raise _uri_error("missing 'counter' parameter")
        kwds["counter"] = validate_counter(_parse_int(params["counter"], "counter"))

    return OTPAuthURI(
        type=otp_type,  # type: ignore[arg-type]
        secret=secret.upper(),
        account=account,
        issuer=issuer,
        image=params.get("image"),
        **kwds,
    )
