"""Exceptions raised by x25519key."""


class X25519KeyError(Exception):
    """Base class for all x25519key errors."""
    pass


class InvalidArgument(X25519KeyError, ValueError):
    """A required argument is missing, or key material has the wrong size."""
    pass


class InvalidFormat(X25519KeyError, ValueError):
    """A fingerprint is not a multibase (base58btc) encoded string."""
    pass


class UnsupportedFingerprintType(X25519KeyError, ValueError):
    """A fingerprint's multicodec header is not the X25519 public key header."""

    def __init__(self, fingerprint):
        super().__init__(f'Unsupported Fingerprint Type: {fingerprint}')
        self.fingerprint = fingerprint


class DecodeError(X25519KeyError, ValueError):
    """Base58 text could not be decoded."""
    pass


class ConversionError(X25519KeyError, ValueError):
    """An Ed25519 key could not be converted to X25519."""
    pass


class MissingPrivateKey(X25519KeyError):
    """An operation needs the private half of a key pair that has none."""
    pass


class FingerprintMismatch(X25519KeyError):
    """A well formed fingerprint encodes a different public key."""
    pass
