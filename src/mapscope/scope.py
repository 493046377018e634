""" The helper namespace handed to mapping functions. Mapping functions
    are written against a single object, conventionally named ``Ditto``,
    exposing the message builders and the byte/text conversions.
"""

from . import codec
from .protocol import factory


class Scope:
    """ A namespace of the five mapping helpers. The instance holds no
        state; it exists so a mapping function can be handed a single
        object rather than importing from several modules.
    """

    build_ditto_protocol_msg = staticmethod(factory.build_protocol_message)
    build_external_msg = staticmethod(factory.build_external_message)
    array_buffer_to_string = staticmethod(codec.bytes_to_text)
    string_to_array_buffer = staticmethod(codec.text_to_bytes)
    as_byte_buffer = staticmethod(codec.as_portable_buffer)

    def __repr__(self):
        return '<mapscope.scope.Scope>'


# end of class Scope


Ditto = Scope()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
