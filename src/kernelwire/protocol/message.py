""" Value objects describing a kernel message: the :class:`Header` shared by
    a message and its parent reference, and the :class:`Message` itself.
    These carry meaning only; translating them to and from frames is the
    job of :mod:`kernelwire.protocol.wire`.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields as dataclass_fields
from typing import Any, Dict, Mapping

from . import fields
from .errors import MalformedEnvelope


@dataclass
class Header:
    """ Identification for one message. The *session* and *username* identify
        the logical client and are carried unchanged along a request/reply
        chain; *msg_id* is unique to each message. A header with every field
        empty is the zero header, used as the parent of unsolicited messages.
    """

    msg_id: str = ""
    username: str = ""
    session: str = ""
    msg_type: str = ""

    def __bool__(self) -> bool:
        return any((self.msg_id, self.username, self.session, self.msg_type))

    def copy(self) -> "Header":
        return Header(self.msg_id, self.username, self.session, self.msg_type)

    def to_dict(self) -> Dict[str, str]:
        return {
            fields.MSG_ID: self.msg_id,
            fields.USERNAME: self.username,
            fields.SESSION: self.session,
            fields.MSG_TYPE: self.msg_type,
        }

    @classmethod
    def from_dict(cls, data: Any, name: str = fields.HEADER) -> "Header":
        """ Build a :class:`Header` from a decoded JSON object. Keys that are
            absent default to the empty string; keys outside the four known
            fields are ignored. Anything other than a mapping of strings is
            rejected with :class:`MalformedEnvelope` naming *name*.
        """

        if not isinstance(data, Mapping):
            raise MalformedEnvelope(name, f"expected a JSON object, got {type(data).__name__}")

        values = dict()

        for attribute in dataclass_fields(cls):
            value = data.get(attribute.name, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise MalformedEnvelope(name, f"{attribute.name} must be a string")
            values[attribute.name] = value

        return cls(**values)


# end of class Header



@dataclass
class Message:
    """ A complete kernel message. *metadata* defaults to an empty mapping and
        is never None once the message exists; *content* is whatever JSON
        value the message type calls for, and is opaque to the codec.
    """

    header: Header = field(default_factory=Header)
    parent_header: Header = field(default_factory=Header)
    metadata: Dict[str, Any] = field(default_factory=dict)
    content: Any = None

    def __post_init__(self) -> None:
        if self.metadata is None:
            self.metadata = dict()

    @property
    def msg_id(self) -> str:
        return self.header.msg_id

    @property
    def msg_type(self) -> str:
        return self.header.msg_type

    def copy(self) -> "Message":
        return Message(
            header=self.header.copy(),
            parent_header=self.parent_header.copy(),
            metadata=copy.deepcopy(self.metadata),
            content=copy.deepcopy(self.content),
        )


# end of class Message

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
