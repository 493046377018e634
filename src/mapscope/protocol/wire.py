""" JSON wire form of a :class:`ProtocolMessage`.

    The document is a single JSON object with the keys ``topic``,
    ``headers``, ``path``, ``value``, ``status`` and ``extra``. Absent
    optional fields are left out rather than written as null.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from .. import json
from ..base import WireFormatError
from . import fields
from .message import ProtocolMessage


logger = logging.getLogger(__name__)

_optional = (fields.VALUE, fields.STATUS, fields.EXTRA)


def to_dict(msg: ProtocolMessage) -> Dict[str, Any]:

    document = {
        fields.TOPIC:   msg.topic,
        fields.HEADERS: dict(msg.headers or {}),
        fields.PATH:    msg.path,
    }

    for key in _optional:
        value = getattr(msg, key)
        if value is not None:
            document[key] = value

    return document


def from_dict(document: Dict[str, Any]) -> ProtocolMessage:

    if not isinstance(document, dict):
        raise WireFormatError('protocol message must be a JSON object, not ' + type(document).__name__)

    missing = [key for key in (fields.TOPIC, fields.PATH) if key not in document]
    if missing:
        raise WireFormatError('protocol message is missing required field(s): ' + ', '.join(missing))

    headers = document.get(fields.HEADERS)
    if headers is None:
        headers = {}

    return ProtocolMessage(
        topic=document[fields.TOPIC],
        path=document[fields.PATH],
        headers=headers,
        value=document.get(fields.VALUE),
        status=document.get(fields.STATUS),
        extra=document.get(fields.EXTRA),
    )


def pack(msg: ProtocolMessage) -> bytes:
    """ Serialize a :class:`ProtocolMessage` to JSON bytes. A value, header
        or extra field the JSON backend cannot encode, such as raw bytes,
        raises :class:`WireFormatError`.
    """

    try:
        return json.dumps(to_dict(msg))
    except (TypeError, json.EncodeError) as e:
        raise WireFormatError('cannot encode protocol message ' + repr(msg.topic) + ': ' + str(e)) from e


def unpack(data) -> ProtocolMessage:
    """ Deserialize JSON bytes (or str) into a :class:`ProtocolMessage`.
        Anything that is not a JSON object with at least a topic and a
        path raises :class:`WireFormatError`.
    """

    try:
        document = json.loads(data)
    except json.DecodeError as e:
        logger.debug('discarding undecodable protocol message: %r', data[:64])
        raise WireFormatError('invalid JSON in protocol message: ' + str(e)) from e

    return from_dict(document)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
