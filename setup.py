"""
liboath setup script
"""
#=============================================================================
# init script env -- ensure cwd = root of source dir
#=============================================================================
import os
root_dir = os.path.abspath(os.path.join(__file__, ".."))
os.chdir(root_dir)

#=============================================================================
# imports
#=============================================================================
import re
from setuptools import setup, find_packages

#=============================================================================
# version string
#=============================================================================

# NOTE: read from source rather than importing liboath,
#       since its dependencies may not be installed yet.
with open(os.path.join(root_dir, "liboath", "__init__.py")) as fh:
    version = re.search(r'^__version__ = "([^"]+)"', fh.read(), re.M).group(1)

#=============================================================================
# static text
#=============================================================================
SUMMARY = "HOTP & TOTP one-time password generation and validation"

DESCRIPTION = """\
liboath generates and validates the one-time passwords used for two-factor
authentication: counter based HOTP codes (RFC 4226) and time based TOTP codes
(RFC 6238), with HMAC-SHA1, HMAC-SHA256 and HMAC-SHA512.

* Secrets are exchanged as base32 strings, as authenticator apps expect.
* TOTP validation tolerates clock drift by checking neighboring time windows.
* HOTP verification resynchronizes the counter within a look-ahead window;
  the counter itself is stored by the application.
* ``otpauth://`` provisioning URIs can be built and parsed.
"""

KEYWORDS = """\
otp hotp totp 2fa oath
rfc4226 rfc6238
"""

CLASSIFIERS = """\
Intended Audience :: Developers
License :: OSI Approved :: BSD License
Natural Language :: English
Operating System :: OS Independent
Programming Language :: Python :: 3
Programming Language :: Python :: 3 :: Only
Programming Language :: Python :: Implementation :: CPython
Programming Language :: Python :: Implementation :: PyPy
Topic :: Security :: Cryptography
Topic :: Software Development :: Libraries
""".splitlines()

if '.dev' in version:
    CLASSIFIERS.append("Development Status :: 3 - Alpha")
else:
    CLASSIFIERS.append("Development Status :: 4 - Beta")

#=============================================================================
# run setup
#=============================================================================
setup(
    # package info
    packages=find_packages(root_dir, include=["liboath", "liboath.*"]),
    zip_safe=True,
    python_requires=">=3.9",
    install_requires=[
        "typing_extensions>=4.0",
    ],

    # metadata
    name="liboath",
    version=version,
    license="BSD",

    description=SUMMARY,
    long_description=DESCRIPTION,
    keywords=KEYWORDS,
    classifiers=CLASSIFIERS,

    extras_require={
        "tests": [
            "pytest",
            "pytest-archon",
        ],
    },
)

#=============================================================================
# eof
#=============================================================================
