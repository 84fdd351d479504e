"""Multiformats fingerprints for X25519 public keys.

A fingerprint is the multicodec header for an X25519 public key followed by
the raw key bytes, base58btc encoded and prefixed with the multibase code for
base58btc::

    'z' + base58btc(0xec 0x01 + public key bytes)

See https://github.com/multiformats/multicodec/blob/master/table.csv and
https://github.com/multiformats/multibase
"""

# Standard lib
import logging
from typing import NamedTuple, Optional

# Deps
from cryptography.hazmat.primitives import constant_time

# Internal modules
from x25519key.encoding import decode_base58, encode_base58
from x25519key.errors import (
    DecodeError,
    FingerprintMismatch,
    InvalidFormat,
    UnsupportedFingerprintType,
)

LOGGER = logging.getLogger(__name__)

# 0xec is the multicodec value for x25519-pub; as an unsigned varint it is
# [0xec, 0x01]
MULTICODEC_X25519_PUB_HEADER = b'\xec\x01'
MULTIBASE_BASE58BTC_PREFIX = 'z'
PUBLIC_KEY_LENGTH = 32


class FingerprintVerification(NamedTuple):
    """Outcome of verify_fingerprint().

    error is None when valid is True, and describes the failed check otherwise.
    """

    valid: bool
    error: Optional[Exception] = None

    def __bool__(self):
        return self.valid


def fingerprint_from_public_key(public_key: bytes) -> str:
    """Get the multibase/multicodec fingerprint of a raw X25519 public key."""

    return MULTIBASE_BASE58BTC_PREFIX + \
        encode_base58(MULTICODEC_X25519_PUB_HEADER + bytes(public_key))


def _decode_multibase(fingerprint) -> bytes:
    if not isinstance(fingerprint, str) or \
            not fingerprint.startswith(MULTIBASE_BASE58BTC_PREFIX):
        raise InvalidFormat('`fingerprint` must be a multibase encoded string.')

    # skip leading `z` that indicates base58 encoding
    return decode_base58(fingerprint[len(MULTIBASE_BASE58BTC_PREFIX):])


def public_key_from_fingerprint(fingerprint: str) -> bytes:
    """Recover the raw public key bytes from a fingerprint.

    Raises InvalidFormat if the fingerprint is not a base58btc multibase
    string or does not hold a 32 byte key, DecodeError if the base58 text is
    malformed and UnsupportedFingerprintType if the multicodec header is not
    the X25519 public key header.
    """

    buffer = _decode_multibase(fingerprint)

    # buffer is: 0xec 0x01 <public key bytes>
    if buffer[:2] != MULTICODEC_X25519_PUB_HEADER:
        LOGGER.debug(f'Rejected multicodec header {buffer[:2].hex()!r}')
        raise UnsupportedFingerprintType(fingerprint)

    public_key = buffer[2:]
    if len(public_key) != PUBLIC_KEY_LENGTH:
        raise InvalidFormat(
            f'Fingerprint holds a {len(public_key)} byte key, expected '
            f'{PUBLIC_KEY_LENGTH} bytes.')

    return public_key


def verify_fingerprint(fingerprint: str, public_key_base58: str) -> FingerprintVerification:
    """Test whether a fingerprint was generated from the given public key.

    Never raises: every failure is returned as the error of an invalid
    FingerprintVerification.
    """

    try:
        fingerprint_buffer = _decode_multibase(fingerprint)
        public_key = decode_base58(public_key_base58)
    except (InvalidFormat, DecodeError) as err:
        return FingerprintVerification(False, err)

    if fingerprint_buffer[:2] != MULTICODEC_X25519_PUB_HEADER:
        return FingerprintVerification(
            False, UnsupportedFingerprintType(fingerprint))

    if not constant_time.bytes_eq(fingerprint_buffer[2:], public_key):
        return FingerprintVerification(
            False,
            FingerprintMismatch('The fingerprint does not match the public key.'))

    return FingerprintVerification(True)
