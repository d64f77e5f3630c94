""" Python implementation of a kernel message codec. This includes parsing
    and verifying signed multipart messages received from front-ends, building
    correlated replies, and routing those replies back through the sockets
    they arrived on.
"""

# Utility components.

from . import config
from . import json

# Semantic message handling, independent of any transport.

from . import protocol
from .protocol import (
    CodecError,
    EncodeError,
    Header,
    MalformedEnvelope,
    Message,
    SignatureError,
    Signer,
    decode,
    encode,
    new_message,
    serialize,
)

# Sending replies.

from . import transport
from .transport import Receipt, ZmqSocketGroup, publish, send_reply

__version__ = '0.1.0'

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
