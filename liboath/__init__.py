"""liboath -- HOTP / TOTP one-time password generation and validation."""

from liboath._secret import generate_secret
from liboath.algorithms import HashAlgorithm
from liboath.api import (
    generate_code,
    generate_hotp,
    generate_totp,
    validate_totp,
    verify_hotp,
)
from liboath.drift import ValidationOutcome
from liboath.errors import (
    InvalidEncodingError,
    OATHError,
    OTPRuntimeError,
    OutOfSyncError,
)
from liboath.generator import compute_code
from liboath.hotp import HOTP, HotpCode, HotpMatch
from liboath.totp import TOTP, TotpCode
from liboath.uri import OTPAuthURI, build_uri, parse_uri

__version__ = "0.1.0"

__all__ = [
    "HOTP",
    "TOTP",
    "HashAlgorithm",
    "HotpCode",
    "HotpMatch",
    "InvalidEncodingError",
    "OATHError",
    "OTPAuthURI",
    "OTPRuntimeError",
    "OutOfSyncError",
    "TotpCode",
    "ValidationOutcome",
    "build_uri",
    "compute_code",
    "generate_code",
    "generate_hotp",
    "generate_secret",
    "generate_totp",
    "parse_uri",
    "validate_totp",
    "verify_hotp",
]
