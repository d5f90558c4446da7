from __future__ import annotations

import enum
import re

__all__ = ["HashAlgorithm"]

_clean_re = re.compile(r"[-_\s]")


class HashAlgorithm(enum.Enum):
    """
    Hash function used inside the HMAC, per :rfc:`6238`.

    Values are the names used by the ``algorithm`` parameter of otpauth URIs.
    """

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def digest_size(self) -> int:
        return _DIGEST_SIZES[self]

    @classmethod
    def parse(cls, value: HashAlgorithm | str) -> HashAlgorithm:
        """
        normalize an algorithm name such as ``"sha1"`` or ``"SHA-256"``.

        :raises ValueError: if the name is not one of the supported hashes.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            msg = f"algorithm must be a HashAlgorithm or str, not {type(value).__name__}"
            raise TypeError(msg)
        name = _clean_re.sub("", value).upper()
        try:
            return cls(name)
        except ValueError:
            msg = f"unsupported hash algorithm: {value!r}"
            raise ValueError(msg) from None


_DIGEST_SIZES = {
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA512: 64,
}
