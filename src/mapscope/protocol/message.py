""" Record types for the two sides of a payload mapping: the internal
    :class:`ProtocolMessage`, and the transport-shaped :class:`ExternalMessage`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, NamedTuple, Optional, Union

from ..buffer import ByteBuffer
from . import fields


BytePayload = Union[bytes, bytearray, memoryview, ByteBuffer]


class Topic(NamedTuple):
    """ The six segments of a protocol message topic, in wire order.
        ``str(topic)`` joins them with slashes, verbatim.
    """

    namespace: str
    id: str
    group: str
    channel: str
    criterion: str
    action: str

    def __str__(self):
        return fields.TOPIC_SEPARATOR.join(str(segment) for segment in self)


    @classmethod
    def parse(cls, topic: str) -> 'Topic':
        """ Split a topic string into its segments. A topic that does not
            have exactly six segments is rejected with a :class:`ValueError`;
            the segment values themselves are not checked.
        """

        segments = topic.split(fields.TOPIC_SEPARATOR)

        if len(segments) != fields.TOPIC_SEGMENTS:
            raise ValueError('topic must have ' + str(fields.TOPIC_SEGMENTS) + ' segments: ' + repr(topic))

        return cls(*segments)


    def is_known(self) -> bool:
        """ Return True if the group, channel, criterion and action are all
            members of the documented vocabularies in :mod:`.fields`. This
            is informational only; nothing in mapscope refuses a topic that
            returns False here.
        """

        return (self.group in fields.GROUPS and
                self.channel in fields.CHANNELS and
                self.criterion in fields.CRITERIA and
                self.action in fields.ACTIONS)


# end of class Topic



@dataclass(frozen=True)
class ProtocolMessage:
    """ A message in the uniform internal protocol representation.

        :ivar topic: ``namespace/id/group/channel/criterion/action``
        :ivar path: The affected sub-resource, for example ``/attributes``.
        :ivar headers: Protocol headers, exactly as handed to the builder.
        :ivar value: The value to apply, or which was applied; None if absent.
        :ivar status: Result status code; None for commands and events.
        :ivar extra: Enrichment fields, if any were selected.
    """

    topic: str
    path: str
    headers: Mapping[str, str]
    value: Any = None
    status: Optional[int] = None
    extra: Optional[Mapping[str, Any]] = None

    def topic_segments(self) -> Topic:
        return Topic.parse(self.topic)


# end of class ProtocolMessage



@dataclass(frozen=True)
class ExternalMessage:
    """ A message in its transport-specific shape. Normally only one of
        *text_payload* and *byte_payload* is set, but nothing here enforces
        that; callers that set both get both back.
    """

    headers: Mapping[str, str]
    text_payload: Optional[str] = None
    byte_payload: Optional[BytePayload] = None
    content_type: Optional[str] = None

    def is_text_message(self) -> bool:
        return self.text_payload is not None


    def is_bytes_message(self) -> bool:
        return self.byte_payload is not None


    def payload(self):
        """ Return the text payload if there is one, otherwise the byte
            payload, otherwise None.
        """

        if self.text_payload is not None:
            return self.text_payload
        return self.byte_payload


# end of class ExternalMessage


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
