"""Multipart framing for kernel messages.

One message on the wire, frame by frame:

    [identity...] <IDS|MSG> signature header parent_header metadata content

The identity frames are prepended by ROUTER sockets and are opaque; they are
kept verbatim so that a reply can be routed back to the original sender.
The signature is computed over the four JSON frames that follow it.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .. import json
from . import fields
from .errors import EncodeError, MalformedEnvelope, SignatureError
from .message import Header, Message
from .signer import Signer


Frames = Sequence[bytes]


def _as_bytes(frame: Any) -> bytes:
    # zmq.Frame (copy=False receives) exposes its buffer as .bytes
    try:
        return frame.bytes
    except AttributeError:
        pass
    return bytes(frame)


def split_identities(frames: Iterable[Any]) -> Tuple[List[bytes], List[bytes]]:
    """Split *frames* at the first delimiter.

    Returns (identities, remainder) where remainder begins with the frame
    after the delimiter.
    """

    frames = [_as_bytes(frame) for frame in frames]

    for index, frame in enumerate(frames):
        if frame == fields.DELIMITER:
            return frames[:index], frames[index + 1:]

    raise MalformedEnvelope("delimiter", f"no {fields.DELIMITER!r} frame among {len(frames)}")


def _loads(name: str, frame: bytes) -> Any:
    try:
        return json.loads(frame)
    except json.decode_errors as exc:
        raise MalformedEnvelope(name, str(exc)) from exc


def _dumps(name: str, value: Any) -> bytes:
    try:
        return json.dumps(value)
    except json.encode_errors as exc:
        raise EncodeError(name, str(exc)) from exc


def decode(frames: Iterable[Any], key: Optional[bytes]) -> Tuple[Message, List[bytes]]:
    """Translate a received multipart message into a :class:`Message` and
    its routing identities, verifying the signature on the way.

    Raises :class:`MalformedEnvelope` if the envelope cannot be split or a
    JSON field cannot be parsed, and :class:`SignatureError` if the message
    does not authenticate. Nothing is parsed until the signature checks out.
    """

    identities, remainder = split_identities(frames)

    if len(remainder) < 5:
        raise MalformedEnvelope(
            "frames", f"expected a signature and 4 JSON frames after the delimiter, got {len(remainder)}"
        )

    signature = remainder[0]
    payload = remainder[1:5]

    if not Signer(key).verify(payload, signature):
        raise SignatureError()

    header_frame, parent_frame, metadata_frame, content_frame = payload

    header = Header.from_dict(_loads(fields.HEADER, header_frame), fields.HEADER)
    if not header.msg_id:
        raise MalformedEnvelope(fields.HEADER, "msg_id is empty")
    if not header.msg_type:
        raise MalformedEnvelope(fields.HEADER, "msg_type is empty")

    parent_header = Header.from_dict(_loads(fields.PARENT_HEADER, parent_frame), fields.PARENT_HEADER)

    metadata = _loads(fields.METADATA, metadata_frame)
    if metadata is None:
        metadata = dict()
    elif not isinstance(metadata, dict):
        raise MalformedEnvelope(fields.METADATA, f"expected a JSON object, got {type(metadata).__name__}")

    content = _loads(fields.CONTENT, content_frame)

    msg = Message(header=header, parent_header=parent_header, metadata=metadata, content=content)
    return msg, identities


def encode(msg: Message, key: Optional[bytes]) -> List[bytes]:
    """Translate *msg* into its five signed frames: signature, header,
    parent_header, metadata, content. The identities and the delimiter are
    not included; see :func:`serialize` for the complete multipart message.
    """

    metadata = msg.metadata
    if metadata is None:
        metadata = dict()

    payload = [
        _dumps(fields.HEADER, msg.header.to_dict()),
        _dumps(fields.PARENT_HEADER, msg.parent_header.to_dict()),
        _dumps(fields.METADATA, metadata),
        _dumps(fields.CONTENT, msg.content),
    ]

    signature = Signer(key).sign(payload)
    return [signature] + payload


def serialize(msg: Message, identities: Iterable[Any], key: Optional[bytes]) -> List[bytes]:
    """Return every frame of the multipart message carrying *msg* back to
    *identities*, ready for a single ``send_multipart`` call.
    """

    frames = [_as_bytes(identity) for identity in identities]
    frames.append(fields.DELIMITER)
    frames.extend(encode(msg, key))
    return frames


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
