"""Ed25519 key pairs, as a source for X25519 key agreement keys.

Only holds key material; signing and verification are not provided.
"""

# Standard lib
from typing import Optional

# Deps
import nacl.signing

# Internal modules
from x25519key.encoding import decode_base58, encode_base58
from x25519key.errors import InvalidArgument

SUITE_ID = 'Ed25519VerificationKey2018'


class Ed25519KeyPair:
    """An Ed25519 signing key pair.

    The private key is the 64-byte libsodium secret key (seed followed by
    public key), as Ed25519VerificationKey2018 key nodes store it.
    """

    type = SUITE_ID

    def __init__(self, public_key_base58: str = None,
                 private_key_base58: str = None,
                 controller: str = None, id: str = None):
        if not public_key_base58:
            raise InvalidArgument('The "publicKeyBase58" property is required.')

        # Fail on bad base58 here rather than at conversion time
        decode_base58(public_key_base58)
        if private_key_base58:
            decode_base58(private_key_base58)

        self.public_key_base58 = public_key_base58
        self.private_key_base58 = private_key_base58 or None
        self.controller = controller
        self.id = id

    @staticmethod
    def generate(controller: str = None, id: str = None): # -> Ed25519KeyPair
        """Generate a new Ed25519 key pair from the OS random source."""

        return Ed25519KeyPair.from_signing_key(
            nacl.signing.SigningKey.generate(), controller=controller, id=id)

    @staticmethod
    def from_seed(seed: bytes, controller: str = None,
                  id: str = None): # -> Ed25519KeyPair
        """Create an Ed25519 key pair from a 32-byte seed."""

        if not isinstance(seed, bytes) or len(seed) != 32:
            raise InvalidArgument('An Ed25519 seed must be 32 bytes.')

        return Ed25519KeyPair.from_signing_key(
            nacl.signing.SigningKey(seed), controller=controller, id=id)

    @staticmethod
    def from_signing_key(signing_key: nacl.signing.SigningKey,
                         controller: str = None,
                         id: str = None): # -> Ed25519KeyPair
        """Create an Ed25519 key pair from a PyNaCl SigningKey."""

        verify_key_bytes = signing_key.verify_key.encode()
        return Ed25519KeyPair(
            public_key_base58=encode_base58(verify_key_bytes),
            private_key_base58=encode_base58(
                signing_key.encode() + verify_key_bytes),
            controller=controller, id=id)

    @staticmethod
    def from_verify_key(verify_key: nacl.signing.VerifyKey,
                        controller: str = None,
                        id: str = None): # -> Ed25519KeyPair
        """Create a public-only Ed25519 key pair from a PyNaCl VerifyKey."""

        return Ed25519KeyPair(
            public_key_base58=encode_base58(verify_key.encode()),
            controller=controller, id=id)

    @property
    def public_key(self) -> bytes:
        return decode_base58(self.public_key_base58)

    @property
    def private_key(self) -> Optional[bytes]:
        if self.private_key_base58 is None:
            return None
        return decode_base58(self.private_key_base58)
