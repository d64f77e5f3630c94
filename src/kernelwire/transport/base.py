"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`kernelwire.protocol` so the protocol remains
transport-agnostic.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Sequence, Union


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class SocketGroup(ABC):
    """The sockets of one kernel, plus the key that signs their traffic.

    A multipart message must be written while holding the lock of the socket
    it goes to, so that two replies on one socket never interleave frames.
    """

    @property
    @abstractmethod
    def key(self) -> bytes:
        """The signing key for this group; empty means trust mode."""

    @abstractmethod
    def socket(self, name: str) -> Any:
        """Return the socket for channel *name*; KeyError if unknown."""

    @abstractmethod
    def lock(self, socket: Any) -> threading.Lock:
        """Return the lock guarding writes to *socket*."""

    def resolve(self, socket: Union[str, Any]) -> Any:
        if isinstance(socket, str):
            return self.socket(socket)
        return socket

    def send_multipart(self, socket: Union[str, Any], frames: Sequence[bytes]) -> None:
        """Write *frames* as one multipart message, holding the socket lock
        for the whole write."""

        socket = self.resolve(socket)
        with self.lock(socket):
            socket.send_multipart(frames)


class Sink(ABC):
    """Passive observer of outbound messages."""

    @abstractmethod
    def record(self, msg_type: str, content: Any) -> None:
        """Note that a message of *msg_type* carrying *content* was sent."""
