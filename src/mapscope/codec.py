""" Byte/text conversion helpers for mapping functions.

    The conversion is a plain one-byte-per-character view: every byte maps
    to the character with the same code point, and every character maps
    back to the low eight bits of its code point. This is *not* a text
    decoder. A UTF-8 payload run through :func:`bytes_to_text` comes out
    as one character per byte, not as the original text; code points
    above 255 run through :func:`text_to_bytes` lose their upper bits.
    Both directions are total: they never raise, and None is treated
    as an empty buffer or string.
"""

from __future__ import annotations

from typing import Optional, Union

from .buffer import ByteBuffer, PortableBuffer


BytesLike = Union[bytes, bytearray, memoryview, ByteBuffer]


def _copy(buffer: Optional[BytesLike]) -> bytes:

    if buffer is None:
        buffer = b''
    elif isinstance(buffer, ByteBuffer):
        buffer = buffer.tobytes()

    return memoryview(buffer).tobytes()


def bytes_to_text(buffer: Optional[BytesLike]) -> str:
    """ Return a string with one character per byte of *buffer*, each
        character's code point being the unsigned value of the byte.
    """

    # latin-1 is exactly the identity mapping between 0-255 and U+0000 to
    # U+00FF, so it can be used to do the per-byte work in one pass.

    return _copy(buffer).decode('latin-1')


def text_to_bytes(text: Optional[str]) -> bytes:
    """ Return one byte per character of *text*, each byte being the low
        eight bits of the character's code point.
    """

    if text is None:
        return b''

    try:
        return text.encode('latin-1')
    except UnicodeEncodeError:
        pass

    # At least one code point is above 255; truncate each one.

    return bytes(ord(character) & 0xFF for character in text)


def as_portable_buffer(buffer: Optional[BytesLike]) -> PortableBuffer:
    """ Copy *buffer* into a new :class:`PortableBuffer` of the same length.
        Later changes to *buffer* are not visible through the result.
    """

    return PortableBuffer(_copy(buffer))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
