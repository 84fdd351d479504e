import nacl.bindings
import pytest

from conftest import X25519_PRIVATE_BYTES
from x25519key.agreement import derive_secret
from x25519key.errors import InvalidArgument, MissingPrivateKey
from x25519key.keypair import X25519KeyPair


def test_secret_is_symmetric():
    alice = X25519KeyPair.generate()
    bob = X25519KeyPair.generate()

    alice_secret = alice.derive_secret(bob)
    bob_secret = bob.derive_secret(alice)

    assert len(alice_secret) == 32
    assert alice_secret == bob_secret


def test_secret_matches_libsodium(x_key_pair):
    bob = X25519KeyPair.generate()

    assert x_key_pair.derive_secret(bob) == \
        nacl.bindings.crypto_scalarmult(X25519_PRIVATE_BYTES, bob.public_key)


def test_public_only_pair_cannot_derive(x_key_pair):
    public_only = X25519KeyPair.from_fingerprint(x_key_pair.fingerprint())

    with pytest.raises(MissingPrivateKey):
        public_only.derive_secret(x_key_pair)


def test_low_order_public_key(x_key_pair):
    low_order = X25519KeyPair.from_public_bytes(bytes(32))

    with pytest.raises(InvalidArgument):
        x_key_pair.derive_secret(low_order)


@pytest.mark.parametrize('private_key,public_key', [
    (b'\x01' * 31, b'\x09' + bytes(31)),
    (b'\x01' * 32, b'\x09' * 33),
])
def test_bad_key_length(private_key, public_key):
    with pytest.raises(InvalidArgument):
        derive_secret(private_key, public_key)
