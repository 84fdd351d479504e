"""Base58 (bitcoin alphabet) helpers."""

# Deps
import base58

# Internal modules
from x25519key.errors import DecodeError


def encode_base58(data: bytes) -> str:
    return base58.b58encode(data).decode('ascii')


def decode_base58(text: str) -> bytes:
    """Decode base58 text, raising DecodeError on anything malformed."""

    if not isinstance(text, str):
        raise DecodeError(f'Expected base58 text, got {type(text).__name__}')
    try:
        return base58.b58decode(text)
    except ValueError as err:
        # Covers bad alphabet characters and non-ascii input
        raise DecodeError(f'Invalid base58 encoding: {err}') from err
