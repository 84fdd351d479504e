"""Shared fixtures.

Fixed key material is for reproducible tests only; the library itself always
generates keys from the OS random source.
"""

import pytest

from x25519key import Ed25519KeyPair, X25519KeyPair

CONTROLLER = 'did:example:1234'

# Arbitrary but fixed 32-byte values
X25519_PRIVATE_BYTES = bytes(range(1, 33))
ED25519_SEED = bytes.fromhex(
    '9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60')


@pytest.fixture
def x_key_pair():
    return X25519KeyPair.from_private_bytes(X25519_PRIVATE_BYTES)


@pytest.fixture
def ed_key_pair():
    return Ed25519KeyPair.from_seed(ED25519_SEED, controller=CONTROLLER,
                                    id=f'{CONTROLLER}#ed-key')
