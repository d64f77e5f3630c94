"""Replying to received messages.

A :class:`Receipt` bundles an inbound message with the routing identities it
arrived with and the socket group of its channel. It lives for as long as
the handler processing the request, and is the only thing needed to send a
reply that finds its way back to the original requester.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from ..protocol import fields, wire
from ..protocol.factory import reply as child_message
from ..protocol.message import Message
from .base import Sink, SocketGroup
from .observe import LogSink


logger = logging.getLogger("kernelwire.transport")

_default_sink = LogSink()


def _record(sink: Optional[Sink], msg: Message) -> None:
    if sink is None:
        sink = _default_sink

    try:
        sink.record(msg.header.msg_type, msg.content)
    except Exception:
        # Observation is advisory; it must never fail a send.
        logger.debug("sink %r failed to record %s", sink, msg.header.msg_type, exc_info=True)


def _send(sockets: SocketGroup, socket: Union[str, Any], msg: Message,
          identities: Iterable[bytes], sink: Optional[Sink]) -> None:

    # Encoding happens before the socket is touched, so a message that cannot
    # be serialized never produces a partial write.
    frames = wire.serialize(msg, identities, sockets.key)
    sockets.send_multipart(socket, frames)
    _record(sink, msg)


@dataclass
class Receipt:
    """A received message, its return identities, and the sockets for
    communication."""

    msg: Message
    identities: List[bytes] = field(default_factory=list)
    sockets: Optional[SocketGroup] = None

    def __post_init__(self) -> None:
        self.identities = [bytes(identity) for identity in self.identities]

    @classmethod
    def from_frames(cls, frames: Iterable[Any], sockets: SocketGroup) -> "Receipt":
        """Decode *frames* received on one of *sockets* into a receipt.
        Codec errors propagate unchanged."""

        msg, identities = wire.decode(frames, sockets.key)
        return cls(msg=msg, identities=identities, sockets=sockets)

    @property
    def key(self) -> bytes:
        if self.sockets is None:
            return b""
        return self.sockets.key

    def send_reply(self, socket: Union[str, Any], msg: Message, sink: Optional[Sink] = None) -> None:
        send_reply(self, socket, msg, sink)

    def reply(
        self,
        msg_type: str,
        content: Any = None,
        metadata: Optional[Dict[str, Any]] = None,
        socket: Union[str, Any] = fields.SHELL,
        sink: Optional[Sink] = None,
    ) -> Message:
        """Build a child of the received message and send it back."""

        msg = child_message(self.msg, msg_type, content, metadata)
        self.send_reply(socket, msg, sink)
        return msg


def send_reply(receipt: Receipt, socket: Union[str, Any], msg: Message, sink: Optional[Sink] = None) -> None:
    """Send *msg* back to the return identities of *receipt* on *socket*.

    The identities, the delimiter, and the signed frames go out as one
    multipart message under the socket's lock. *socket* may be a socket or
    a channel name known to the receipt's socket group.
    """

    if receipt.sockets is None:
        raise ValueError("receipt has no socket group to reply through")

    _send(receipt.sockets, socket, msg, receipt.identities, sink)


def publish(sockets: SocketGroup, msg: Message, socket: Union[str, Any] = fields.IOPUB,
            sink: Optional[Sink] = None) -> None:
    """Send an unsolicited message, such as a status or stream update,
    with no routing identities."""

    _send(sockets, socket, msg, (), sink)
