"""Ed25519 to X25519 key conversion.

Ed25519 and X25519 keys live on birationally equivalent forms of Curve25519
(twisted Edwards and Montgomery). libsodium, through PyNaCl, does the point
and scalar conversion; this module validates the input and maps failures to
ConversionError.
"""

# Standard lib
import logging

# Deps
import nacl.bindings
import nacl.exceptions
import nacl.signing

# Internal modules
from x25519key.encoding import decode_base58, encode_base58
from x25519key.errors import ConversionError

LOGGER = logging.getLogger(__name__)

ED25519_PUBLIC_KEY_LENGTH = 32
ED25519_SEED_LENGTH = 32
ED25519_SECRET_KEY_LENGTH = 64


def convert_ed_public_key(ed_public_key: bytes) -> bytes:
    """Convert a 32-byte Ed25519 public key into a 32-byte X25519 public key.

    Raises ConversionError if the key is not a valid Ed25519 point.
    """

    if not isinstance(ed_public_key, bytes) or \
            len(ed_public_key) != ED25519_PUBLIC_KEY_LENGTH:
        raise ConversionError(
            'Error converting to X25519; Invalid Ed25519 public key.')

    try:
        ed_public_pynacl = nacl.signing.VerifyKey(ed_public_key)
        x_public_pynacl = ed_public_pynacl.to_curve25519_public_key()
    except nacl.exceptions.CryptoError as err:
        # libsodium rejects points off the curve and points of small order
        LOGGER.debug(f'libsodium rejected Ed25519 public key: {err}')
        raise ConversionError(
            'Error converting to X25519; Invalid Ed25519 public key.') from err

    return x_public_pynacl.encode()


def convert_ed_private_key(ed_private_key: bytes) -> bytes:
    """Convert an Ed25519 private key into a 32-byte X25519 private key.

    Accepts either the 32-byte seed or the 64-byte libsodium secret key (seed
    followed by public key). Raises ConversionError on anything else.
    """

    if not isinstance(ed_private_key, bytes) or \
            len(ed_private_key) not in (ED25519_SEED_LENGTH,
                                        ED25519_SECRET_KEY_LENGTH):
        raise ConversionError(
            'Error converting to X25519; Invalid Ed25519 private key.')

    try:
        if len(ed_private_key) == ED25519_SEED_LENGTH:
            ed_private_pynacl = nacl.signing.SigningKey(ed_private_key)
            return ed_private_pynacl.to_curve25519_private_key().encode()

        return nacl.bindings.crypto_sign_ed25519_sk_to_curve25519(ed_private_key)
    except nacl.exceptions.CryptoError as err:
        raise ConversionError(
            'Error converting to X25519; Invalid Ed25519 private key.') from err


def convert_ed_public_key_base58(ed_public_key_base58: str) -> str:
    """Base58 in, base58 out version of convert_ed_public_key()."""

    return encode_base58(
        convert_ed_public_key(decode_base58(ed_public_key_base58)))


def convert_ed_private_key_base58(ed_private_key_base58: str) -> str:
    """Base58 in, base58 out version of convert_ed_private_key()."""

    return encode_base58(
        convert_ed_private_key(decode_base58(ed_private_key_base58)))
