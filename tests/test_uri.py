import pytest

from liboath.algorithms import HashAlgorithm
from liboath.errors import InvalidEncodingError, OATHRuntimeWarning
from liboath.uri import OTPAuthURI, build_uri, parse_uri
from tests.utils_ import KEY4, no_warnings


def test_build_defaults() -> None:
    assert build_uri(KEY4, "alice@example.org", "Example") == (
        "otpauth://totp/alice%40example.org?secret=JBSWY3DPEHPK3PXP"
        "&issuer=Example&algorithm=SHA1&digits=6&period=30"
    )


def test_build_custom() -> None:
    uri = build_uri(
        KEY4,
        "alice",
        "Example Co",
        algorithm="sha256",
        digits=8,
        period=60,
        image="https://example.org/logo.png",
        issuer_prefix=True,
    )
    assert uri == (
        "otpauth://totp/Example%20Co%3Aalice?secret=JBSWY3DPEHPK3PXP"
        "&issuer=Example%20Co&algorithm=SHA256&digits=8&period=60"
        "&image=https%3A%2F%2Fexample.org%2Flogo.png"
    )


def test_build_hotp() -> None:
    uri = build_uri(KEY4, "alice", "Example", type="hotp", counter=5)
    assert uri == (
        "otpauth://hotp/alice?secret=JBSWY3DPEHPK3PXP"
        "&issuer=Example&algorithm=SHA1&digits=6&counter=5"
    )
    with pytest.raises(TypeError):
        build_uri(KEY4, "alice", "Example", type="hotp")


def test_build_normalizes_secret() -> None:
    uri = build_uri("jbswy3dpehpk3pxp", "alice", "Example")
    assert "secret=JBSWY3DPEHPK3PXP&" in uri


@pytest.mark.parametrize(
    ("kwds", "error"),
    [
        ({"secret": ""}, ValueError),
        ({"secret": "not base32!"}, InvalidEncodingError),
        ({"account": "a:b"}, ValueError),
        ({"issuer": "a:b"}, ValueError),
        ({"digits": 0}, ValueError),
        ({"period": 0}, ValueError),
        ({"algorithm": "md5"}, ValueError),
        ({"type": "motp"}, ValueError),
    ],
)
def test_build_errors(kwds: dict, error: type) -> None:
    kwds = {"secret": KEY4, "account": "alice", "issuer": "Example", **kwds}
    with pytest.raises(error):
        build_uri(**kwds)


def test_parse_minimal() -> None:
    assert parse_uri(f"otpauth://totp/alice?secret={KEY4}") == OTPAuthURI(
        type="totp",
        secret=KEY4,
        account="alice",
    )


def test_parse_full() -> None:
    result = parse_uri(
        "otpauth://hotp/Example%20Co:alice%40example.org?secret=jbswy3dpehpk3pxp"
        "&issuer=Example%20Co&algorithm=SHA512&digits=8&counter=10"
        "&image=https%3A%2F%2Fexample.org%2Flogo.png"
    )
    assert result == OTPAuthURI(
        type="hotp",
        secret=KEY4,
        account="alice@example.org",
        issuer="Example Co",
        algorithm=HashAlgorithm.SHA512,
        digits=8,
        counter=10,
        image="https://example.org/logo.png",
    )


def test_parse_issuer_from_label() -> None:
    result = parse_uri(f"otpauth://totp/Example:alice?secret={KEY4}")
    assert result.issuer == "Example"
    assert result.account == "alice"


@pytest.mark.parametrize(
    "kwds",
    [
        {},
        {"algorithm": HashAlgorithm.SHA256, "digits": 8, "period": 60},
        {"issuer_prefix": True, "image": "https://example.org/logo.png"},
        {"type": "hotp", "counter": 0},
    ],
)
def test_round_trip(kwds: dict) -> None:
    uri = build_uri(KEY4, "alice@example.org", "Example Co", **kwds)
    with no_warnings():
        result = parse_uri(uri)
    assert result.secret == KEY4
    assert result.account == "alice@example.org"
    assert result.issuer == "Example Co"
    assert result.type == kwds.get("type", "totp")
    assert result.algorithm == kwds.get("algorithm", HashAlgorithm.SHA1)
    assert result.digits == kwds.get("digits", 6)
    assert result.counter == kwds.get("counter")
    assert result.image == kwds.get("image")


@pytest.mark.parametrize(
    "uri",
    [
        f"http://totp/alice?secret={KEY4}",
        f"otpauth://motp/alice?secret={KEY4}",
        f"otpauth://totp/?secret={KEY4}",
        f"otpauth://totp/a:b:c?secret={KEY4}",
        "otpauth://totp/alice?issuer=Example",
        f"otpauth://totp/alice?secret={KEY4}&secret={KEY4}",
        f"otpauth://totp/Example:alice?secret={KEY4}&issuer=Other",
        f"otpauth://totp/alice?secret={KEY4}&algorithm=MD5",
        f"otpauth://totp/alice?secret={KEY4}&digits=six",
        f"otpauth://totp/alice?secret={KEY4}&digits=11",
        f"otpauth://totp/alice?secret={KEY4}&period=0",
        f"otpauth://hotp/alice?secret={KEY4}",
        "otpauth://totp/alice?secret=AB!D",
    ],
)
def test_parse_errors(uri: str) -> None:
    with pytest.raises(ValueError):
        parse_uri(uri)


def test_parse_unknown_parameter() -> None:
    with pytest.warns(OATHRuntimeWarning, match="unexpected parameters"):
        result = parse_uri(f"otpauth://totp/alice?secret={KEY4}&color=red")
    assert result.secret == KEY4
