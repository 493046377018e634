from . import fields
from . import message
from . import builder
from . import factory
from . import wire

from .message import ProtocolMessage, ExternalMessage, Topic
from .builder import ProtocolMessageBuilder, ExternalMessageBuilder
from .factory import build_protocol_message, build_external_message


"""
mapscope Protocol Layer
=======================

This package defines the two message shapes a payload mapping works with,
and the utilities used to construct them.

The protocol layer MUST NOT depend on the byte/text codec, and MUST NOT
perform I/O.

---------------------------------------------------------------------

Layer Overview
--------------

Mapping function (user code)
    │
    ▼
Factory (factory.py)
    build_protocol_message()
    build_external_message()
    One call per mapped message

    │
    ▼
Builders (builder.py)
    Fluent construction
    - Topic assembled verbatim from six segments
    - Unset fields left empty / None
    - Never raises

    │
    ▼
Message Model (message.py)
    Immutable records
    - ProtocolMessage
    - ExternalMessage
    - Topic

    │
    ▼
Field Vocabulary (fields.py)
    Canonical JSON field names and topic segment values

Alongside: wire.py maps ProtocolMessage <-> JSON bytes.

---------------------------------------------------------------------

Design Principles
-----------------

1. Total construction
   Building a message never fails; malformed input yields a
   structurally valid, possibly meaningless, message.

2. No enforcement
   Topic vocabularies and payload exclusivity are the caller's business.

3. Fresh records
   Every build returns a new instance; nothing is pooled or retained.

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
