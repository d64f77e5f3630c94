"""ZeroMQ transport."""

from .sockets import ZmqSocketGroup
