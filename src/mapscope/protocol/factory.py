"""Convenience constructors for mapped messages."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .builder import ExternalMessageBuilder, ProtocolMessageBuilder
from .message import BytePayload, ExternalMessage, ProtocolMessage


def build_protocol_message(
    namespace: str,
    id: str,
    group: str,
    channel: str,
    criterion: str,
    action: str,
    path: str,
    headers: Mapping[str, str],
    value: Any = None,
    status: Optional[int] = None,
    extra: Optional[Mapping[str, Any]] = None,
) -> ProtocolMessage:
    """ Build a :class:`ProtocolMessage` whose topic is the six topic
        arguments joined with slashes. None of the arguments are checked;
        a group, channel, criterion or action outside the vocabularies in
        :mod:`.fields` still yields a message.
    """

    return (
        ProtocolMessageBuilder()
        .topic(namespace, id, group, channel, criterion, action)
        .path(path)
        .headers(headers)
        .value(value)
        .status(status)
        .extra(extra)
        .build()
    )


def build_external_message(
    headers: Mapping[str, str],
    text_payload: Optional[str] = None,
    byte_payload: Optional[BytePayload] = None,
    content_type: Optional[str] = None,
) -> ExternalMessage:
    """ Build an :class:`ExternalMessage`. The *headers* mapping is stored
        as-is, not copied. Both payloads may be set at once.
    """

    return (
        ExternalMessageBuilder(headers)
        .text(text_payload)
        .binary(byte_payload)
        .content_type(content_type)
        .build()
    )


def text_message(headers: Mapping[str, str], payload: str, content_type: Optional[str] = 'text/plain') -> ExternalMessage:
    return build_external_message(headers, text_payload=payload, content_type=content_type)


def bytes_message(headers: Mapping[str, str], payload, content_type: Optional[str] = 'application/octet-stream') -> ExternalMessage:
    return build_external_message(headers, byte_payload=payload, content_type=content_type)
