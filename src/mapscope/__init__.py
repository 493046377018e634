""" Python implementation of the payload mapping helpers. This includes the
    builders for internal protocol messages and external messages, and the
    byte/text conversions mapping functions use to move between binary
    payloads and text.
"""

# Utility components.

from . import json
from . import base
from . import buffer
from . import codec

# Submodules used by multiple other components.

from . import protocol
from . import config
home = config.directory

# Primary public-facing interfaces.

from .protocol import ProtocolMessage, ExternalMessage, Topic
from .protocol import build_protocol_message, build_external_message
from .codec import bytes_to_text, text_to_bytes, as_portable_buffer
from .buffer import ByteBuffer, PortableBuffer

from . import scope
Ditto = scope.Ditto

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
