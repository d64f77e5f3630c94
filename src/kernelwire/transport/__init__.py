"""Transport layer implementations."""

from .base import Sink, SocketGroup, TransportError
from .observe import LogSink, MemorySink, NullSink
from .receipt import Receipt, publish, send_reply
from .zmq import ZmqSocketGroup
