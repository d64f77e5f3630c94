from . import errors
from . import fields
from . import message
from . import signer
from . import wire
from . import factory

from .errors import CodecError, EncodeError, MalformedEnvelope, SignatureError
from .message import Header, Message
from .signer import Signer
from .wire import decode, encode, serialize, split_identities
from .factory import new_id, new_message


"""
kernelwire Protocol Layer
=========================

This package defines the message codec spoken between a kernel and its
front-ends. It turns raw multipart frames into structured messages, checks
their signatures, and performs the inverse transform for outbound traffic.

Nothing in this package performs I/O, holds shared mutable state, or blocks;
every operation is safe to call from any number of threads at once.

The protocol layer MUST NOT depend on any transport implementation.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Dispatch Code (caller)
    │
    ▼
Message Factory (factory.py)
    Correlated construction of outbound messages
    - new_message(): shared session/username, fresh msg_id,
      parent_header copied from the triggering message

    │
    ▼
Wire Codec (wire.py)
    Maps Message <-> multipart frames
    - decode(): delimiter scan, signature check, per-field JSON parse
    - encode(): per-field JSON dump, signature

    │
    ▼
Signer (signer.py)
    HMAC-SHA256 over the four JSON frames, hex encoded
    Empty key == trust mode

    │
    ▼
Message Model (message.py) / Field Vocabulary (fields.py)
    Header, Message, canonical names

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Transport Layer (kernelwire.transport)
    Receipt / send_reply(): identities + delimiter + signed frames,
    written as one multipart message under a per-socket lock.

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
