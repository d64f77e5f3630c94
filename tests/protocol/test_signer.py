import hashlib
import hmac

import pytest

import kernelwire
from kernelwire.protocol import signer


parts = (b'{"msg_id":"1"}', b'{}', b'{}', b'{"code":"1+1"}')


def test_sign_streams_parts():

    expected = hmac.new(b'secret', b''.join(parts), hashlib.sha256).hexdigest()

    signature = signer.sign(b'secret', parts)
    assert isinstance(signature, bytes)
    assert signature == expected.encode()
    assert signature == signature.lower()
    assert len(signature) == 64


def test_str_key_matches_bytes_key():
    assert signer.sign('secret', parts) == signer.sign(b'secret', parts)


def test_verify():

    signature = signer.sign(b'secret', parts)

    assert signer.verify(b'secret', parts, signature)
    assert signer.verify(b'secret', parts, signature.decode())
    assert not signer.verify(b'other', parts, signature)
    assert not signer.verify(b'secret', parts[:3] + (b'{"code":"2+2"}',), signature)


def test_verify_undecodable_signature():

    signature = signer.sign(b'secret', parts)

    assert not signer.verify(b'secret', parts, signature[:-1])
    assert not signer.verify(b'secret', parts, b'zz' + signature[2:])
    assert not signer.verify(b'secret', parts, b'')
    assert not signer.verify(b'secret', parts, 'é' * 64)


def test_trust_mode():

    for key in (b'', '', None):
        instance = kernelwire.Signer(key)
        assert not instance.enabled
        assert instance.sign(parts) == b''
        assert instance.verify(parts, b'')
        assert instance.verify(parts, b'not even hex')


def test_key_types():

    assert kernelwire.Signer(bytearray(b'secret')).key == b'secret'
    assert kernelwire.Signer(memoryview(b'secret')).key == b'secret'

    for key in (5, 0, 1.5, ['secret']):
        with pytest.raises(TypeError):
            kernelwire.Signer(key)

    with pytest.raises(TypeError):
        kernelwire.ZmqSocketGroup(5)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
