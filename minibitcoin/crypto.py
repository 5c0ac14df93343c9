"""ECDSA over secp256k1: key generation, signing and verification with hex encodings."""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed

_CURVE = ec.SECP256K1()

# Digest lengths accepted for signing, mapped to the matching prehash algorithm.
_PREHASH_BY_LENGTH = {
    20: hashes.SHA1(),
    28: hashes.SHA224(),
    32: hashes.SHA256(),
    48: hashes.SHA384(),
    64: hashes.SHA512(),
}


class CryptoError(Exception):
    """Raised when a key cannot be created or a message cannot be signed."""


def _digest_algorithm(digest: bytes) -> ec.ECDSA:
    try:
        algorithm = _PREHASH_BY_LENGTH[len(digest)]
    except KeyError:
        raise CryptoError(f"unsupported message hash length: {len(digest)} bytes") from None
    return ec.ECDSA(Prehashed(algorithm))


def generate_key_pair() -> tuple[str, str]:
    """Generate a secp256k1 key pair.

    Returns ``(private_key_hex, public_key_hex)``: the private scalar as
    uppercase hex without leading zeros, and the public key as an
    uncompressed SEC1 point in lowercase hex.
    """
    try:
        private_key = ec.generate_private_key(_CURVE)
    except Exception as exc:  # pragma: no cover - backend failure
        raise CryptoError("failed to generate key pair") from exc

    private_hex = format(private_key.private_numbers().private_value, "X")
    public_bytes = private_key.public_key().public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.UncompressedPoint
    )
    return private_hex, public_bytes.hex()


def sign_message(private_key_hex: str, message_hash: str) -> str:
    """Sign a hex-encoded message hash; return the DER signature as hex."""
    try:
        scalar = int(private_key_hex, 16)
        private_key = ec.derive_private_key(scalar, _CURVE)
    except (ValueError, TypeError) as exc:
        raise CryptoError("failed to set private key") from exc

    try:
        digest = bytes.fromhex(message_hash)
    except ValueError as exc:
        raise CryptoError("message hash is not valid hex") from exc

    try:
        signature = private_key.sign(digest, _digest_algorithm(digest))
    except ValueError as exc:
        raise CryptoError("failed to sign message") from exc
    return signature.hex()


def verify_signature(public_key_hex: str, message_hash: str, signature_hex: str) -> bool:
    """Return True if ``signature_hex`` is a valid signature of ``message_hash``."""
    try:
        public_key = ec.EllipticCurvePublicKey.from_encoded_point(
            _CURVE, bytes.fromhex(public_key_hex)
        )
        digest = bytes.fromhex(message_hash)
        signature = bytes.fromhex(signature_hex)
        algorithm = _digest_algorithm(digest)
    except (ValueError, TypeError, CryptoError):
        return False

    try:
        public_key.verify(signature, digest, algorithm)
    except (InvalidSignature, ValueError):
        return False
    return True