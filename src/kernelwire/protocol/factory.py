"""Convenience constructors for protocol messages."""

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from .message import Header, Message


def new_id() -> str:
    # uuid4 draws its 122 random bits from os.urandom.
    return str(uuid.uuid4())


def new_message(
    msg_type: str,
    parent: Optional[Message] = None,
    *,
    session: str = "",
    username: str = "",
) -> Message:
    """Create a message of *msg_type* correlated to *parent*.

    The session and username are carried over from the parent's header, and
    the parent header is copied into ``parent_header``. Without a parent the
    message is unsolicited: the parent header stays zero-valued and the
    session/username come from the keyword arguments. Metadata and content
    are left empty for the caller to populate.
    """

    header = Header(msg_id=new_id(), username=username, session=session, msg_type=msg_type)

    if parent is None:
        parent_header = Header()
    else:
        parent_header = parent.header.copy()
        header.session = parent.header.session
        header.username = parent.header.username

    return Message(header=header, parent_header=parent_header)


def reply(parent: Message, msg_type: str, content: Any = None, metadata: Optional[Dict[str, Any]] = None) -> Message:
    """Create a populated child message of *parent*."""

    msg = new_message(msg_type, parent)
    msg.content = content
    if metadata is not None:
        msg.metadata = dict(metadata)
    return msg
