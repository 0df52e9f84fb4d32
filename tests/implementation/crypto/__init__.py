"""Crypto reference implementation package.

This package provides CESR-encoding cryptographic primitives built on the
base64url codec, used to produce realistic test inputs.
"""

from .cesr import from_cesr, to_cesr
from .hash import Hasher
from .nonce import Noncer
from .secp256r1 import Secp256r1, Secp256r1Verifier

__all__ = [
    "from_cesr",
    "to_cesr",
    "Hasher",
    "Noncer",
    "Secp256r1",
    "Secp256r1Verifier",
]
