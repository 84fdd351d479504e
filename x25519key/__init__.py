"""X25519KeyAgreementKey2019 key pairs: fingerprints, Ed25519 conversion and
Diffie-Hellman shared secrets."""

from x25519key.agreement import derive_secret
from x25519key.config import SUITE_ID
from x25519key.conversion import convert_ed_private_key, convert_ed_public_key
from x25519key.ed25519 import Ed25519KeyPair
from x25519key.errors import (
    ConversionError,
    DecodeError,
    FingerprintMismatch,
    InvalidArgument,
    InvalidFormat,
    MissingPrivateKey,
    UnsupportedFingerprintType,
    X25519KeyError,
)
from x25519key.fingerprint import (
    FingerprintVerification,
    fingerprint_from_public_key,
    public_key_from_fingerprint,
    verify_fingerprint,
)
from x25519key.identity import KeyPairIdentity
from x25519key.keypair import X25519KeyPair

__version__ = '0.1.0'
