"""Portable byte buffer.

Mapping functions hand binary payloads to downstream consumers as a
:class:`PortableBuffer` rather than as whatever object the caller happened
to receive. The buffer owns its own copy of the bytes, so the caller is
free to reuse or mutate the original afterwards.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Union

try:
    import numpy
except ImportError:
    numpy = None


class ByteBuffer(ABC):
    """Minimal contract for a read-only byte buffer."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of bytes in the buffer."""

    @abstractmethod
    def read_uint8(self, offset: int) -> int:
        """Return the unsigned value of the byte at *offset*."""

    @abstractmethod
    def slice(self, begin: int = 0, end: Optional[int] = None) -> 'ByteBuffer':
        """Return a new buffer covering bytes *begin* up to *end*."""

    @abstractmethod
    def tobytes(self) -> bytes:
        """Return the buffer contents as an immutable bytes object."""

    def __bytes__(self) -> bytes:
        return self.tobytes()

    @property
    def limit(self) -> int:
        return len(self)


class PortableBuffer(ByteBuffer):
    """ A :class:`ByteBuffer` backed by a private copy of the bytes it was
        constructed from. Any bytes-like object is accepted: bytes,
        bytearray, memoryview, array.array, another :class:`ByteBuffer`.

        The buffer compares equal to other buffers and to bytes-like
        objects with the same content, and supports the usual sequence
        operations; indexing returns integers in the range 0-255, slicing
        returns a new :class:`PortableBuffer`.
    """

    __slots__ = ('_data',)

    def __init__(self, data: Union[bytes, bytearray, memoryview, ByteBuffer] = b''):

        if isinstance(data, ByteBuffer):
            data = data.tobytes()

        # tobytes() always copies, and flattens strided or multi-dimensional
        # views in C order.

        self._data = memoryview(data).tobytes()


    def __len__(self) -> int:
        return len(self._data)


    def __iter__(self) -> Iterator[int]:
        return iter(self._data)


    def __getitem__(self, index):
        if isinstance(index, slice):
            return PortableBuffer(self._data[index])
        return self._data[index]


    def __eq__(self, other) -> bool:
        if isinstance(other, ByteBuffer):
            return self._data == other.tobytes()
        try:
            return self._data == memoryview(other).tobytes()
        except TypeError:
            return NotImplemented


    def __hash__(self) -> int:
        return hash(self._data)


    def __repr__(self) -> str:
        return 'PortableBuffer(' + repr(self._data) + ')'


    def __buffer__(self, flags):
        return memoryview(self._data)


    def read_uint8(self, offset: int) -> int:
        if offset < 0 or offset >= len(self._data):
            raise IndexError('offset out of range: ' + str(offset))
        return self._data[offset]


    def slice(self, begin: int = 0, end: Optional[int] = None) -> 'PortableBuffer':
        return PortableBuffer(self._data[begin:end])


    def tobytes(self) -> bytes:
        return self._data


    def hex(self) -> str:
        return self._data.hex()


    def to_numpy(self):
        """ Return the contents as a one-dimensional numpy array of unsigned
            8-bit integers. The array is a fresh copy and is writable.
        """

        if numpy is None:
            raise RuntimeError('numpy is not available, cannot export buffer as an array')

        return numpy.frombuffer(self._data, dtype=numpy.uint8).copy()


# end of class PortableBuffer


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
