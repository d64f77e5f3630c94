""" Keyed authentication for the signed portion of a message. The MAC is
    HMAC-SHA256 over the four JSON frames, fed one at a time into a single
    MAC instance, and rendered as lowercase hex.

    An empty key puts the signer in trust mode: signatures are empty and
    every verification succeeds. This is intentional, and is how a kernel
    runs on loopback without a configured key.
"""

import binascii
import hashlib
import hmac


digest = hashlib.sha256


def as_key(key):
    """ Normalize a signing key to bytes; None and str are accepted. """

    if key is None:
        return b''

    if isinstance(key, str):
        return key.encode('utf-8')

    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError('signing key must be str or bytes, not ' + type(key).__name__)

    return bytes(key)



class Signer:
    """ Sign and verify ordered sequences of byte blobs with a fixed *key*.
        Instances hold no state beyond the key and are safe to share between
        threads.
    """

    def __init__(self, key=None):
        self.key = as_key(key)


    @property
    def enabled(self):
        return len(self.key) != 0


    def _mac(self, parts):

        mac = hmac.new(self.key, digestmod=digest)
        for part in parts:
            mac.update(part)

        return mac


    def sign(self, parts):
        """ Return the hex signature for *parts*, as bytes. The signature is
            empty if no key is configured.
        """

        if not self.enabled:
            return b''

        return self._mac(parts).hexdigest().encode('ascii')


    def verify(self, parts, signature):
        """ Return True if *signature* is valid for *parts*. A signature that
            cannot be decoded as hex is simply invalid; with no key configured
            every signature is valid.
        """

        if not self.enabled:
            return True

        if isinstance(signature, str):
            try:
                signature = signature.encode('ascii')
            except UnicodeEncodeError:
                return False

        try:
            expected = binascii.unhexlify(bytes(signature))
        except (binascii.Error, ValueError):
            return False

        computed = self._mac(parts).digest()
        return hmac.compare_digest(computed, expected)


# end of class Signer



def sign(key, parts):
    return Signer(key).sign(parts)


def verify(key, parts, signature):
    return Signer(key).verify(parts, signature)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
