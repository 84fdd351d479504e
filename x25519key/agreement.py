"""X25519 Diffie-Hellman."""

# Deps
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PublicKey

# Internal modules
from x25519key.errors import InvalidArgument


def derive_secret(private_key: bytes, public_key: bytes) -> bytes:
    """Perform a Diffie-Hellman derivation.

    Returns the raw 32-byte shared secret of our private scalar and the
    remote public point. This is input for a key derivation function (KDF),
    not a key; use it as one only after running it through e.g. HKDF.
    """

    try:
        private = X25519PrivateKey.from_private_bytes(private_key)
        public = X25519PublicKey.from_public_bytes(public_key)
    except (TypeError, ValueError) as err:
        raise InvalidArgument(f'Invalid X25519 key: {err}') from err

    try:
        return private.exchange(public)
    except ValueError as err:
        # cryptography refuses low order points, whose shared secret is zero
        raise InvalidArgument(
            'Invalid X25519 public key; shared secret is all zeros.') from err
