import base58
import nacl.bindings
import nacl.signing
import pytest

from conftest import ED25519_SEED
from x25519key.conversion import (
    convert_ed_private_key,
    convert_ed_private_key_base58,
    convert_ed_public_key,
    convert_ed_public_key_base58,
)
from x25519key.errors import ConversionError, DecodeError
from x25519key.keypair import X25519KeyPair


@pytest.fixture
def signing_key():
    return nacl.signing.SigningKey(ED25519_SEED)


def test_public_conversion_is_deterministic(signing_key):
    ed_public = signing_key.verify_key.encode()

    first = convert_ed_public_key(ed_public)
    second = convert_ed_public_key(ed_public)

    assert len(first) == 32
    assert first == second


def test_public_conversion_matches_pynacl(signing_key):
    ed_public = signing_key.verify_key.encode()

    assert convert_ed_public_key(ed_public) == \
        signing_key.verify_key.to_curve25519_public_key().encode()


def test_seed_and_secret_key_convert_alike(signing_key):
    seed = signing_key.encode()
    secret_key = seed + signing_key.verify_key.encode()

    x_private = convert_ed_private_key(seed)

    assert len(x_private) == 32
    assert x_private == convert_ed_private_key(secret_key)
    assert x_private == \
        nacl.bindings.crypto_sign_ed25519_sk_to_curve25519(secret_key)


def test_converted_keys_are_a_pair(signing_key):
    x_private = convert_ed_private_key(signing_key.encode())
    x_public = convert_ed_public_key(signing_key.verify_key.encode())

    assert X25519KeyPair.from_private_bytes(x_private).public_key == x_public


@pytest.mark.parametrize('ed_public', [
    bytes(32),                      # small order point
    b'\x01' + bytes(31),            # identity point
    b'\x01' * 31,                   # too short
    b'\x01' * 33,                   # too long
    'not bytes',
    None,
])
def test_invalid_public_key(ed_public):
    with pytest.raises(ConversionError, match='Invalid Ed25519 public key'):
        convert_ed_public_key(ed_public)


@pytest.mark.parametrize('ed_private', [
    b'',
    b'\x01' * 31,
    b'\x01' * 48,
    b'\x01' * 65,
    None,
])
def test_invalid_private_key(ed_private):
    with pytest.raises(ConversionError, match='Invalid Ed25519 private key'):
        convert_ed_private_key(ed_private)


def test_base58_variants(signing_key):
    ed_public = signing_key.verify_key.encode()
    ed_public_b58 = base58.b58encode(ed_public).decode()
    ed_private_b58 = base58.b58encode(signing_key.encode()).decode()

    assert base58.b58decode(convert_ed_public_key_base58(ed_public_b58)) == \
        convert_ed_public_key(ed_public)
    assert base58.b58decode(convert_ed_private_key_base58(ed_private_b58)) == \
        convert_ed_private_key(signing_key.encode())


def test_base58_variant_bad_text():
    with pytest.raises(DecodeError):
        convert_ed_public_key_base58('0OIl')
