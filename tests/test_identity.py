from x25519key.config import SECURITY_CONTEXT_URL
from x25519key.identity import KeyPairIdentity


def test_with_fingerprint_derives_id():
    identity = KeyPairIdentity(controller='did:example:1234')

    assert identity.with_fingerprint('z6LSabc').id == 'did:example:1234#z6LSabc'


def test_with_fingerprint_keeps_id():
    identity = KeyPairIdentity(id='did:example:1234#key-1',
                               controller='did:example:1234')

    assert identity.with_fingerprint('z6LSabc') is identity


def test_with_fingerprint_without_controller():
    assert KeyPairIdentity().with_fingerprint('z6LSabc').id is None


def test_export():
    identity = KeyPairIdentity(id='did:example:1234#key-1',
                               controller='did:example:1234')

    assert identity.export('SomeKeyType', include_context=True) == {
        '@context': SECURITY_CONTEXT_URL,
        'id': 'did:example:1234#key-1',
        'type': 'SomeKeyType',
        'controller': 'did:example:1234',
    }
    assert KeyPairIdentity().export('SomeKeyType') == {'type': 'SomeKeyType'}
