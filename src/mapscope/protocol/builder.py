from __future__ import annotations

from typing import Optional, Mapping, Any

from . import fields
from .message import ProtocolMessage, ExternalMessage, Topic, BytePayload


class ProtocolMessageBuilder:
    """ Fluent construction of a :class:`ProtocolMessage`. Every setter
        returns the builder; :func:`build` can be called at any point and
        always succeeds, with unset topic segments left empty.
    """

    def __init__(self, namespace: str = '', id: str = ''):
        self._namespace = namespace
        self._id = id

        self._group: str = ''
        self._channel: str = ''
        self._criterion: str = ''
        self._action: str = ''
        self._path: str = ''
        self._headers: Mapping[str, str] = {}
        self._value: Any = None
        self._status: Optional[int] = None
        self._extra: Optional[Mapping[str, Any]] = None

    # Topic
    def entity(self, namespace: str, id: str):
        self._namespace = namespace
        self._id = id
        return self

    def group(self, group: str):
        self._group = group
        return self

    def things(self):
        self._group = fields.THINGS
        return self

    def twin(self):
        self._channel = fields.TWIN
        return self

    def live(self):
        self._channel = fields.LIVE
        return self

    def channel(self, channel: str):
        self._channel = channel
        return self

    def criterion(self, criterion: str):
        self._criterion = criterion
        return self

    def action(self, action: str):
        self._action = action
        return self

    def topic(self, namespace: str, id: str, group: str, channel: str, criterion: str, action: str):
        self._namespace = namespace
        self._id = id
        self._group = group
        self._channel = channel
        self._criterion = criterion
        self._action = action
        return self

    # Body
    def path(self, path: str):
        self._path = path
        return self

    def headers(self, headers: Mapping[str, str]):
        self._headers = headers
        return self

    def value(self, value: Any):
        self._value = value
        return self

    def status(self, status: Optional[int]):
        self._status = status
        return self

    def extra(self, extra: Optional[Mapping[str, Any]]):
        self._extra = extra
        return self

    # Finalize
    def build(self) -> ProtocolMessage:

        topic = Topic(
            self._namespace,
            self._id,
            self._group,
            self._channel,
            self._criterion,
            self._action,
        )

        return ProtocolMessage(
            topic=str(topic),
            path=self._path,
            headers=self._headers,
            value=self._value,
            status=self._status,
            extra=self._extra,
        )


class ExternalMessageBuilder:
    """ Fluent construction of an :class:`ExternalMessage`. Setting a text
        payload does not clear a byte payload, or vice versa.
    """

    def __init__(self, headers: Optional[Mapping[str, str]] = None):
        self._headers: Mapping[str, str] = {} if headers is None else headers
        self._text: Optional[str] = None
        self._bytes: Optional[BytePayload] = None
        self._content_type: Optional[str] = None

    def headers(self, headers: Mapping[str, str]):
        self._headers = headers
        return self

    def text(self, payload: Optional[str]):
        self._text = payload
        return self

    def binary(self, payload: Optional[BytePayload]):
        self._bytes = payload
        return self

    def content_type(self, content_type: Optional[str]):
        self._content_type = content_type
        return self

    # Finalize
    def build(self) -> ExternalMessage:
        return ExternalMessage(
            headers=self._headers,
            text_payload=self._text,
            byte_payload=self._bytes,
            content_type=self._content_type,
        )


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
