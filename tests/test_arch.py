from pytest_archon import archrule


def test_engine_does_not_import_outer_layers() -> None:
    (
        archrule("engine-is-self-contained")
        .match("liboath.*")
        .exclude("liboath.api", "liboath.uri")
        .should_not_import("liboath.api", "liboath.uri")
        .check("liboath", only_direct_imports=True)
    )


def test_utils_are_leaf_modules() -> None:
    (
        archrule("utils-are-leaves")
        .match("liboath._utils*")
        .should_not_import(
            "liboath.generator",
            "liboath.drift",
            "liboath.hotp",
            "liboath.totp",
            "liboath.otp",
        )
        .check("liboath", only_direct_imports=True)
    )
