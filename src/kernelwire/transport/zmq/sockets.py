"""ZeroMQ socket group.

Wraps the already-bound sockets of one kernel. Creating, binding, and polling
the sockets is the caller's business; this class only knows how to write one
complete multipart message at a time to each of them.
"""

from __future__ import annotations

import threading
import weakref
from typing import Any, Dict, Optional, Sequence, Union

import zmq

from ...protocol import fields
from ...protocol.signer import as_key
from ..base import SocketGroup, TransportError


class ZmqSocketGroup(SocketGroup):
    """The shell, iopub, control, stdin and heartbeat sockets of a kernel,
    and the key used to sign messages on all of them.
    """

    def __init__(
        self,
        key: Optional[Union[bytes, str]] = None,
        shell: Optional[zmq.Socket] = None,
        iopub: Optional[zmq.Socket] = None,
        control: Optional[zmq.Socket] = None,
        stdin: Optional[zmq.Socket] = None,
        hb: Optional[zmq.Socket] = None,
    ):
        self._key = as_key(key)
        self._sockets: Dict[str, Any] = dict()
        self._locks: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()
        self._locks_lock = threading.Lock()

        given = zip(fields.CHANNELS, (shell, iopub, control, stdin, hb))
        for name, socket in given:
            if socket is not None:
                self._sockets[name] = socket
                self._locks[socket] = threading.Lock()

    @property
    def key(self) -> bytes:
        return self._key

    def socket(self, name: str) -> Any:
        try:
            return self._sockets[name]
        except KeyError:
            raise KeyError(f"no {name!r} socket in this group") from None

    def lock(self, socket: Any) -> threading.Lock:
        # Sockets handed in directly, rather than by channel name, still get
        # a lock of their own; it goes away with the socket.
        with self._locks_lock:
            lock = self._locks.get(socket)
            if lock is None:
                lock = threading.Lock()
                self._locks[socket] = lock
            return lock

    def send_multipart(self, socket: Union[str, Any], frames: Sequence[bytes]) -> None:
        socket = self.resolve(socket)
        with self.lock(socket):
            try:
                socket.send_multipart(frames)
            except zmq.ZMQError as exc:
                raise TransportError(f"multipart send failed: {exc}") from exc

    def close(self, linger: Optional[int] = None) -> None:
        for socket in self._sockets.values():
            socket.close(linger=linger)
        self._sockets.clear()
        with self._locks_lock:
            self._locks.clear()
