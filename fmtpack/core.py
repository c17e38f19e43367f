"""
Size calculation, packing and unpacking driven by a compiled descriptor.

All the operations walk the tokens in the same way: under the native aligned
byte order the offset is first moved forward to the native alignment of the
field, then the field occupies count * size bytes. Bytes skipped as padding
(alignment or 'x') are never written.
"""
import logging
from typing import Iterator, List, Tuple

from .enum import Kind
from .compiler import CompiledFormat, FormatToken, ensure_compiled
from .registry import FormatSpec, encode, decode, encode_string, decode_string
from .exceptions import BufferTooSmall, InsufficientValues


logger = logging.getLogger(__name__)


def pad_count(offset: int, alignment: int) -> int:
    '''Minimal padding that brings offset to a multiple of alignment.'''
    return (alignment - (offset % alignment)) % alignment


def iter_tokens(compiled: CompiledFormat, offset: int = 0) -> Iterator[Tuple[int, FormatToken, FormatSpec]]:
    """Yield (offset, token, spec) for each token, the offset being the aligned
    start of the token."""
    for token in compiled.tokens:
        spec = token.spec
        if compiled.byteorder.aligned:
            offset += pad_count(offset, spec.alignment)

        yield offset, token, spec

        offset += token.count * spec.size


def calculate_size(descriptor) -> int:
    compiled = ensure_compiled(descriptor)

    size = 0
    for offset, token, spec in iter_tokens(compiled):
        size = offset + token.count * spec.size

    return size


def _check_bounds(buffer, offset: int, size: int) -> None:
    if offset < 0 or offset + size > len(buffer):
        raise BufferTooSmall(offset, size, len(buffer))


def _encode_fields(compiled: CompiledFormat, buffer, offset: int, values) -> List[Tuple[int, bytes]]:
    '''Returns the list of (offset, raw) to write; nothing is written here so
    a failure leaves the buffer as it was.'''
    writes = []
    cursor = 0

    def next_value():
        nonlocal cursor
        if cursor >= len(values):
            raise InsufficientValues(cursor + 1, len(values))
        value = values[cursor]
        cursor += 1
        return value

    for field_offset, token, spec in iter_tokens(compiled, offset):
        _check_bounds(buffer, field_offset, token.count * spec.size)

        if spec.kind is Kind.PAD:
            continue

        if spec.kind is Kind.STRING:
            writes.append((field_offset, encode_string(next_value(), token.count)))
            continue

        for idx in range(token.count):
            raw = encode(spec, next_value(), compiled.byteorder)
            writes.append((field_offset + idx * spec.size, raw))

    if cursor < len(values):
        logger.debug("'%s' ignores %d extra value(s)", compiled, len(values) - cursor)

    return writes


def pack_into(descriptor, buffer, offset: int, *values):
    """Pack the values into the writable buffer starting at offset and return the buffer."""
    compiled = ensure_compiled(descriptor)

    if memoryview(buffer).readonly:
        raise TypeError(f"can't pack into a read-only {buffer.__class__.__name__}")

    writes = _encode_fields(compiled, buffer, offset, values)

    for field_offset, raw in writes:
        buffer[field_offset:field_offset + len(raw)] = raw

    logger.debug("packed %d field(s) with '%s' at offset %d", len(writes), compiled, offset)

    return buffer


def pack(descriptor, *values) -> bytes:
    compiled = ensure_compiled(descriptor)
    buffer = bytearray(calculate_size(compiled))

    return bytes(pack_into(compiled, buffer, 0, *values))


def unpack_from(descriptor, buffer, offset: int = 0) -> tuple:
    """Decode the values described by the descriptor from buffer starting at offset.

    The buffer is never modified. Strings are returned with all their count bytes,
    trailing NULs included."""
    compiled = ensure_compiled(descriptor)
    data = memoryview(buffer).cast('B')

    values = []
    for field_offset, token, spec in iter_tokens(compiled, offset):
        _check_bounds(data, field_offset, token.count * spec.size)

        if spec.kind is Kind.PAD:
            continue

        if spec.kind is Kind.STRING:
            values.append(decode_string(data[field_offset:field_offset + token.count]))
            continue

        for idx in range(token.count):
            start = field_offset + idx * spec.size
            values.append(decode(spec, data[start:start + spec.size], compiled.byteorder))

    logger.debug("unpacked %d value(s) with '%s' at offset %d", len(values), compiled, offset)

    return tuple(values)


def unpack(descriptor, buffer) -> tuple:
    return unpack_from(descriptor, buffer, 0)
