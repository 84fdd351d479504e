"""X25519KeyAgreementKey2019 key pairs.

An X25519 key pair for Diffie-Hellman key agreement, in the representation
used by linked-data documents (e.g. DID documents)::

    {
        "id": "did:example:123#z6LS...",
        "type": "X25519KeyAgreementKey2019",
        "controller": "did:example:123",
        "publicKeyBase58": "..."
    }

A key pair may be generated, built from base58 key material, converted from
an Ed25519 key pair, or rebuilt (public half only) from its fingerprint.

Key bytes are held as plain `bytes` for the lifetime of the object and are not
zeroized.
"""

# Standard lib
import logging
from typing import Optional

# Deps
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey

# Internal modules
from x25519key import agreement, conversion, fingerprint
from x25519key.config import SUITE_ID
from x25519key.encoding import decode_base58, encode_base58
from x25519key.errors import InvalidArgument, MissingPrivateKey
from x25519key.identity import KeyPairIdentity

LOGGER = logging.getLogger(__name__)

KEY_LENGTH = 32


def _decode_key(key_base58: str, name: str) -> bytes:
    key = decode_base58(key_base58)
    if len(key) != KEY_LENGTH:
        raise InvalidArgument(
            f'The "{name}" property must decode to {KEY_LENGTH} bytes, '
            f'got {len(key)}.')
    return key


class X25519KeyPair:
    """An X25519 key agreement key pair.

    Important attributes:
    type        -- the suite id, always X25519KeyAgreementKey2019
    identity    -- the KeyPairIdentity (id and controller)
    public_key  -- the 32 raw public key bytes
    private_key -- the 32 raw private key bytes, or None
    """

    type = SUITE_ID

    def __init__(self, public_key_base58: str = None,
                 private_key_base58: str = None,
                 controller: str = None, id: str = None):
        """Create a key pair from base58 encoded keys.

        Keyword arguments:
        public_key_base58 -- base58 encoded public key (required)
        private_key_base58 -- base58 encoded private key (default None)
        controller -- the controller, e.g. a DID (default None)
        id -- the key id (default `controller#fingerprint` if controller set)
        """

        if not public_key_base58:
            raise InvalidArgument('The "publicKeyBase58" property is required.')

        self.public_key = _decode_key(public_key_base58, 'publicKeyBase58')
        self.private_key = None
        if private_key_base58:
            self.private_key = _decode_key(private_key_base58, 'privateKeyBase58')

        self.identity = KeyPairIdentity(id=id, controller=controller) \
            .with_fingerprint(self.fingerprint())

    def __repr__(self):
        return (f'{type(self).__name__}(id={self.id!r}, '
                f'controller={self.controller!r}, '
                f'public_key_base58={self.public_key_base58!r}, '
                f'private={self.private_key is not None})')

    @property
    def id(self) -> Optional[str]:
        return self.identity.id

    @property
    def controller(self) -> Optional[str]:
        return self.identity.controller

    @property
    def public_key_base58(self) -> str:
        return encode_base58(self.public_key)

    @property
    def private_key_base58(self) -> Optional[str]:
        if self.private_key is None:
            return None
        return encode_base58(self.private_key)

    @staticmethod
    def generate(controller: str = None, id: str = None): # -> X25519KeyPair
        """Generate a new X25519 key pair from the OS random source."""

        private = X25519PrivateKey.generate()
        kp = X25519KeyPair.from_private_bytes(
            private.private_bytes(
                encoding=serialization.Encoding.Raw,
                format=serialization.PrivateFormat.Raw,
                encryption_algorithm=serialization.NoEncryption()),
            controller=controller, id=id)

        LOGGER.debug(f'Generated X25519 key pair {kp.fingerprint()}')
        return kp

    @staticmethod
    def from_private_bytes(private_bytes: bytes, controller: str = None,
                           id: str = None): # -> X25519KeyPair
        """Create a key pair from raw private key bytes.

        The public key is computed from the private key.
        """

        try:
            private = X25519PrivateKey.from_private_bytes(private_bytes)
        except (TypeError, ValueError) as err:
            raise InvalidArgument(f'Invalid X25519 private key: {err}') from err

        public_bytes = private.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw)

        return X25519KeyPair(
            public_key_base58=encode_base58(public_bytes),
            private_key_base58=encode_base58(private_bytes),
            controller=controller, id=id)

    @staticmethod
    def from_public_bytes(public_bytes: bytes, controller: str = None,
                          id: str = None): # -> X25519KeyPair
        """Create a public-only key pair from raw public key bytes."""

        return X25519KeyPair(
            public_key_base58=encode_base58(bytes(public_bytes)),
            controller=controller, id=id)

    @staticmethod
    def from_options(options: dict): # -> X25519KeyPair
        """Create a key pair from a key node or an options dict.

        Recognized keys are `controller`, `id`, `publicKeyBase58` and
        `privateKeyBase58`; the snake_case spellings of the latter two are
        accepted as well. Other keys (`type`, `@context`, ...) are ignored.
        """

        return X25519KeyPair(
            public_key_base58=options.get('publicKeyBase58',
                                          options.get('public_key_base58')),
            private_key_base58=options.get('privateKeyBase58',
                                           options.get('private_key_base58')),
            controller=options.get('controller'),
            id=options.get('id'))

    @staticmethod
    def from_ed_key_pair(ed_key_pair): # -> X25519KeyPair
        """Derive an X25519 key pair from an Ed25519 key pair.

        The public key is always converted, the private key only if the
        Ed25519 key pair has one. The controller is carried over but the id is
        not: a new id is derived from the new fingerprint.

        ed_key_pair is anything with `public_key_base58`, `controller` and
        optionally `private_key_base58` attributes, e.g. an Ed25519KeyPair.
        """

        public_key_base58 = conversion.convert_ed_public_key_base58(
            ed_key_pair.public_key_base58)

        private_key_base58 = None
        if getattr(ed_key_pair, 'private_key_base58', None):
            private_key_base58 = conversion.convert_ed_private_key_base58(
                ed_key_pair.private_key_base58)

        return X25519KeyPair(
            public_key_base58=public_key_base58,
            private_key_base58=private_key_base58,
            controller=getattr(ed_key_pair, 'controller', None))

    @staticmethod
    def from_fingerprint(fingerprint_str: str): # -> X25519KeyPair
        """Create a public-only key pair from a key fingerprint.

        Raises InvalidFormat, DecodeError or UnsupportedFingerprintType if the
        fingerprint is malformed.
        """

        return X25519KeyPair.from_public_bytes(
            fingerprint.public_key_from_fingerprint(fingerprint_str))

    @staticmethod
    def fingerprint_from_public_key(public_key_base58: str) -> str:
        """Get the fingerprint of a base58 encoded X25519 public key."""

        return fingerprint.fingerprint_from_public_key(
            _decode_key(public_key_base58, 'publicKeyBase58'))

    def fingerprint(self) -> str:
        """Get the multiformats fingerprint of this key pair's public key."""

        return fingerprint.fingerprint_from_public_key(self.public_key)

    def verify_fingerprint(self, fingerprint_str: str): # -> FingerprintVerification
        """Test whether the fingerprint was generated from this key pair.

        Never raises; see fingerprint.verify_fingerprint().
        """

        return fingerprint.verify_fingerprint(
            fingerprint_str, self.public_key_base58)

    def derive_secret(self, public_key) -> bytes:
        """Derive a shared secret with a remote key pair.

        The result is raw Diffie-Hellman output: pass it through a key
        derivation function (KDF) to get a shared key, never use it as one
        directly.

        Raises MissingPrivateKey if this key pair has no private key.
        """

        if self.private_key is None:
            raise MissingPrivateKey(
                'A private key is required to derive a shared secret.')

        return agreement.derive_secret(self.private_key, public_key.public_key)

    def add_public_key(self, key: dict) -> dict:
        """Add the public key material to a key node."""

        key['publicKeyBase58'] = self.public_key_base58
        return key

    def add_private_key(self, key: dict) -> dict:
        """Add the private key material to a key node."""

        key['privateKeyBase58'] = self.private_key_base58
        return key

    def export(self, public_key: bool = True, private_key: bool = False,
               include_context: bool = False) -> dict:
        """Export the key pair as a key node.

        Keyword arguments:
        public_key -- include publicKeyBase58 (default True)
        private_key -- include privateKeyBase58 (default False)
        include_context -- include the security vocabulary @context
                           (default False)
        """

        if not public_key and not private_key:
            raise InvalidArgument(
                'Export requires specifying either "public_key" or '
                '"private_key".')
        if private_key and self.private_key is None:
            raise MissingPrivateKey('No private key to export.')

        node = self.identity.export(self.type, include_context=include_context)
        if public_key:
            self.add_public_key(node)
        if private_key:
            self.add_private_key(node)

        return node
