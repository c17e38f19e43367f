"""
Static table of the specifiers understood by the descriptors.

Each specifier character maps to exactly one FormatSpec describing its size,
signedness, native alignment and kind; encode() and decode() convert a single
value using a branch per kind.
"""
import logging
import struct
from typing import NamedTuple

from .enum import Kind
from .meta import ByteOrder
from .exceptions import UnknownSpecifier, PackException, UnpackException


logger = logging.getLogger(__name__)


class FormatSpec(NamedTuple):
    specifier: str
    size: int
    signed: bool
    alignment: int
    kind: Kind


REGISTRY = {_.specifier: _ for _ in (
    FormatSpec('x', 1, False, 1, Kind.PAD),
    FormatSpec('c', 1, False, 1, Kind.CHAR),
    FormatSpec('b', 1, True,  1, Kind.INT),
    FormatSpec('B', 1, False, 1, Kind.INT),
    FormatSpec('h', 2, True,  1, Kind.INT),
    FormatSpec('H', 2, False, 2, Kind.INT),
    FormatSpec('i', 4, True,  4, Kind.INT),
    FormatSpec('I', 4, False, 4, Kind.INT),
    FormatSpec('l', 4, True,  4, Kind.INT),
    FormatSpec('L', 4, False, 4, Kind.INT),
    FormatSpec('q', 8, True,  8, Kind.INT),
    FormatSpec('Q', 8, False, 8, Kind.INT),
    FormatSpec('f', 4, True,  4, Kind.REAL),
    FormatSpec('d', 8, True,  8, Kind.REAL),
    FormatSpec('s', 1, False, 1, Kind.STRING),
)}

SPECIFIERS = ''.join(REGISTRY)


def lookup(specifier: str) -> FormatSpec:
    try:
        return REGISTRY[specifier]
    except KeyError:
        raise UnknownSpecifier(specifier) from None


def _char_ordinal(value) -> int:
    if isinstance(value, (bytes, bytearray)) and len(value) == 1:
        return value[0]

    if isinstance(value, str) and len(value) == 1 and ord(value) < 0x100:
        return ord(value)

    raise PackException(f'{value!r} is not a single byte character')


def _struct_format(spec: FormatSpec, byteorder: ByteOrder) -> str:
    # with an explicit prefix struct uses standard sizes, that coincide with ours
    return byteorder.struct_prefix + spec.specifier


def encode(spec: FormatSpec, value, byteorder: ByteOrder) -> bytes:
    """Convert a single value to the spec.size bytes representing it."""
    if spec.kind is Kind.CHAR:
        return bytes((_char_ordinal(value),))

    if spec.kind in (Kind.INT, Kind.REAL):
        try:
            return struct.pack(_struct_format(spec, byteorder), value)
        except (struct.error, OverflowError) as e:
            logger.error(e)
            raise PackException(f"can't pack {value!r} as '{spec.specifier}': {e}") from e

    raise PackException(f"specifier '{spec.specifier}' has no scalar encoding")


def decode(spec: FormatSpec, raw: bytes, byteorder: ByteOrder):
    if spec.kind is Kind.CHAR:
        return chr(raw[0])

    if spec.kind in (Kind.INT, Kind.REAL):
        try:
            return struct.unpack(_struct_format(spec, byteorder), raw)[0]
        except struct.error as e:
            logger.error(e)
            raise UnpackException(f"can't unpack {bytes(raw)!r} as '{spec.specifier}': {e}") from e

    raise UnpackException(f"specifier '{spec.specifier}' has no scalar decoding")


def encode_string(value, width: int) -> bytes:
    '''Text is encoded as UTF-8, binary strings are taken as they are; the result
    is truncated to the width of the field but never padded.'''
    if isinstance(value, str):
        data = value.encode('utf-8')
    elif isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
    else:
        raise PackException(f'{value!r} is not a string')

    return data[:width]


def decode_string(raw: bytes) -> str:
    try:
        return bytes(raw).decode('utf-8')
    except UnicodeDecodeError as e:
        logger.error(e)
        raise UnpackException(f'{bytes(raw)!r} is not valid UTF-8') from e
