import io
import os
import logging

from .compiler import ensure_compiled
from .core import calculate_size, pack, unpack
from .exceptions import TruncatedStream, BufferTooSmall


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around path/bytes/file objects to
    uniform their properties: the codec only needs to read exactly N bytes
    and to write all the bytes it is given.'''
    def __init__(self, obj, flags='rb'):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self.flags = flags
        self.obj = obj
        self._owned = False

        init_method = getattr(self, 'init_%s' % self.obj.__class__.__name__, self.init_file)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\' with flags \'%s\'' % (self.obj, self.flags))
        self.obj = open(self.obj, self.flags)
        self._owned = True

    def init_bytes(self):
        '''We think these are raw bytes, only to be read: writing would go to a copy'''
        if 'w' in self.flags or '+' in self.flags:
            raise ValueError('raw bytes can\'t be used as an output stream, use pack_into() instead')
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_bytes
    init_memoryview = init_bytes

    def init_file(self):
        if isinstance(self.obj, os.PathLike):
            self.obj = os.fspath(self.obj)
            return self.init_str()

        if not (hasattr(self.obj, 'read') or hasattr(self.obj, 'write')):
            raise ValueError('\'%s\' is the wrong kind of object to use as a stream' % self.obj.__class__.__name__)

    def close(self):
        '''Only what we opened is closed, the rest belongs to the caller'''
        if self._owned:
            self.obj.close()

    def read_exactly(self, n: int) -> bytes:
        chunks = []
        remaining = n
        while remaining > 0:
            chunk = self.obj.read(remaining)
            if not chunk:
                raise TruncatedStream(n, n - remaining)
            chunks.append(chunk)
            remaining -= len(chunk)

        return b''.join(chunks)

    def write_all(self, data: bytes) -> int:
        view = memoryview(data)
        written = 0
        while written < len(view):
            count = self.obj.write(view[written:])
            # non-blocking raw streams return None when nothing can be written
            if not count:
                raise TruncatedStream(len(view), written)
            written += count

        return written


def read_packed(descriptor, stream) -> tuple:
    '''Read from the stream exactly the bytes needed by the descriptor and unpack them.'''
    if not isinstance(stream, Stream):
        with Stream(stream) as wrapped:
            return read_packed(descriptor, wrapped)

    compiled = ensure_compiled(descriptor)
    raw = stream.read_exactly(calculate_size(compiled))

    return unpack(compiled, raw)


def write_packed(descriptor, stream, *values) -> int:
    if not isinstance(stream, Stream):
        with Stream(stream, flags='wb') as wrapped:
            return write_packed(descriptor, wrapped, *values)

    compiled = ensure_compiled(descriptor)

    return stream.write_all(pack(compiled, *values))


def iter_unpack(descriptor, buffer):
    '''Yield the records contained in buffer, one after the other.'''
    compiled = ensure_compiled(descriptor)
    size = calculate_size(compiled)
    data = memoryview(buffer).cast('B')

    if size == 0:
        raise ValueError(f"'{compiled}' describes an empty record")

    if len(data) % size:
        raise BufferTooSmall(len(data) - len(data) % size, size, len(data))

    for offset in range(0, len(data), size):
        yield unpack(compiled, data[offset:offset + size])
