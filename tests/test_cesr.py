"""Tests for CESR primitives encoded over the base64url codec.

Digests, nonces, public keys, and signatures are the typical payloads
passed through the codec; these tests check that each survives the trip.
"""

from __future__ import annotations

import base64

import blake3
import pytest

from tests.implementation.crypto import (
    Hasher,
    Noncer,
    Secp256r1,
    Secp256r1Verifier,
    from_cesr,
    to_cesr,
)


@pytest.mark.asyncio
async def test_hash_encoding() -> None:
    """Test that a CESR digest decodes back to the Blake3 hash."""
    hasher = Hasher()

    digest = await hasher.sum("hello world")

    assert len(digest) == 44
    assert digest.startswith("E")
    assert from_cesr(digest, 1, 1) == blake3.blake3(b"hello world").digest()


@pytest.mark.asyncio
async def test_hash_matches_standard_library_encoding() -> None:
    """Test that the codec produces the same text as urlsafe_b64encode."""
    hasher = Hasher()
    raw = bytes([0]) + Hasher.sum256(b"message")
    expected = base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")

    assert await hasher.sum("message") == f"E{expected[1:]}"


def test_captured_identity_decodes() -> None:
    """Test that a captured identity digest decodes to 32 bytes."""
    raw = from_cesr("EOomshl9rfHJu4HviTTg7mFiL_skvdF501ZpY4d3bHIP", 1, 1)

    assert len(raw) == 32
    assert to_cesr("E", 1, raw) == "EOomshl9rfHJu4HviTTg7mFiL_skvdF501ZpY4d3bHIP"


@pytest.mark.asyncio
async def test_nonce_encoding() -> None:
    """Test that nonces carry 128 bits in 24 characters."""
    noncer = Noncer()

    nonce = await noncer.generate128()

    assert len(nonce) == 24
    assert nonce.startswith("0A")
    assert len(from_cesr(nonce, 2, 2)) == 16


@pytest.mark.asyncio
async def test_public_key_round_trip() -> None:
    """Test that a generated public key loads from its CESR text."""
    key = Secp256r1()
    await key.generate()

    public_key = await key.public()

    assert len(public_key) == 48
    assert public_key.startswith("1AAI")
    assert "=" not in public_key
    Secp256r1Verifier.load_public_key(public_key)


@pytest.mark.asyncio
async def test_signature_round_trip() -> None:
    """Test that a CESR signature verifies after decoding."""
    key = Secp256r1()
    await key.generate()

    signature = await key.sign("message")

    assert len(signature) == 88
    assert signature.startswith("0I")
    await key.verify("message", signature)


@pytest.mark.asyncio
async def test_tampered_signature_fails() -> None:
    """Test that a signature for a different message does not verify."""
    key = Secp256r1()
    await key.generate()

    signature = await key.sign("message")

    with pytest.raises(ValueError):
        await key.verify("other message", signature)


@pytest.mark.asyncio
async def test_unsigned_key_raises() -> None:
    """Test that using a key before generation raises."""
    key = Secp256r1()

    with pytest.raises(ValueError, match="keypair not generated"):
        await key.public()
