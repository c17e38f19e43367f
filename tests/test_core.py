import struct
import sys

import pytest

from fmtpack import (
    calculate_size,
    compile_format,
    pack,
    pack_into,
    unpack,
    unpack_from,
)
from fmtpack.core import pad_count
from fmtpack.exceptions import (
    BufferTooSmall,
    InsufficientValues,
    PackException,
    UnpackException,
)


def test_pad_count():
    assert pad_count(0, 4) == 0
    assert pad_count(1, 4) == 3
    assert pad_count(4, 4) == 0
    assert pad_count(13, 8) == 3
    assert pad_count(7, 1) == 0


@pytest.mark.parametrize('descriptor,size', [
    ('', 0),
    ('3i', 12),
    ('@bi', 8),
    ('=bi', 5),
    ('<bi', 5),
    ('!bq', 9),
    ('@bq', 16),
    ('@bh', 3),
    ('@bH', 4),
    ('@cd', 16),
    ('@bf', 8),
    ('@b 3s i', 8),
    ('@16s', 16),
    ('@3x', 3),
    ('@i b', 5),
])
def test_calculate_size(descriptor, size):
    assert calculate_size(descriptor) == size


def test_calculate_size_compiled():
    assert calculate_size(compile_format('<2Q')) == 16


def test_pack_empty():
    assert pack('') == b''
    assert unpack('', b'') == ()


def test_pack_byteorder():
    assert pack('<I', 1) == b'\x01\x00\x00\x00'
    assert pack('>I', 1) == b'\x00\x00\x00\x01'
    assert pack('!I', 1) == b'\x00\x00\x00\x01'
    assert pack('=I', 1) == (1).to_bytes(4, sys.byteorder)
    assert pack('@I', 1) == (1).to_bytes(4, sys.byteorder)


def test_pack_alignment():
    """Under the default byte order the padding is skipped, so it stays zeroed
    in a freshly allocated buffer."""
    raw = pack('<bi', -1, 2)
    assert raw == b'\xff\x02\x00\x00\x00'

    raw = pack('@bi', -1, 2)
    assert len(raw) == 8
    assert raw[:4] == b'\xff\x00\x00\x00'
    assert raw[4:] == (2).to_bytes(4, sys.byteorder)


def test_pack_repeated():
    assert pack('>3H', 1, 2, 3) == b'\x00\x01\x00\x02\x00\x03'
    assert unpack('>3H', b'\x00\x01\x00\x02\x00\x03') == (1, 2, 3)


def test_pack_string():
    assert pack('5s', 'ab') == b'ab\x00\x00\x00'
    assert pack('2s', 'abc') == b'ab'
    assert pack('<H 3s', 7, b'xyz') == b'\x07\x00xyz'


def test_pack_string_leaves_tail_untouched():
    buffer = bytearray(b'\xff' * 5)

    pack_into('5s', buffer, 0, 'ab')

    assert buffer == b'ab\xff\xff\xff'


def test_unpack_string_keeps_nul():
    assert unpack('5s', b'ab\x00\x00\x00') == ('ab\x00\x00\x00',)


def test_pack_pad_untouched():
    buffer = bytearray(b'\xaa' * 6)

    result = pack_into('<2x i', buffer, 0, 5)

    assert result is buffer
    assert buffer[:2] == b'\xaa\xaa'
    assert buffer[2:] == b'\x05\x00\x00\x00'
    assert unpack('<2x i', buffer) == (5,)


def test_pack_into_offset():
    buffer = bytearray(10)

    pack_into('>H', buffer, 3, 0xbeef)

    assert buffer == b'\x00\x00\x00\xbe\xef\x00\x00\x00\x00\x00'
    assert unpack_from('>H', buffer, 3) == (0xbeef,)


def test_pack_into_offset_aligned():
    """The alignment is relative to the start of the buffer, not to the offset."""
    buffer = bytearray(8)

    pack_into('@i', buffer, 1, 7)

    assert buffer[:4] == b'\x00' * 4
    assert buffer[4:] == (7).to_bytes(4, sys.byteorder)
    assert unpack_from('@i', buffer, 1) == (7,)


def test_roundtrip_all_specifiers():
    descriptor = '<c b B h H i I l L q Q f d 4s'
    values = (
        'a', -1, 255, -300, 65535,
        -2 ** 31, 2 ** 32 - 1, 7, 8,
        -2 ** 63, 2 ** 64 - 1,
        0.5, 3.25, 'abcd',
    )

    raw = pack(descriptor, *values)

    assert len(raw) == calculate_size(descriptor) == 1 + 1 + 1 + 2 + 2 + 4 * 4 + 8 * 2 + 4 + 8 + 4
    assert unpack(descriptor, raw) == values


def test_roundtrip_aligned_matches_struct():
    """Without the quirk of 'h' the aligned layout coincides with the one of the C compiler."""
    descriptor = '@b i c q H d'
    values = (1, -2, 'z', 3, 4, 5.0)

    raw = pack(descriptor, *values)

    assert raw == struct.pack('@bicqHd', 1, -2, b'z', 3, 4, 5.0)
    assert unpack(descriptor, raw) == values


def test_unpack_from_memoryview():
    data = memoryview(b'\x00\x01\x02\x03')

    assert unpack_from('>BH', data, 1) == (1, 0x0203)


def test_pack_insufficient_values():
    with pytest.raises(InsufficientValues) as e:
        pack('<2H', 1)

    assert e.value.given == 1


def test_pack_into_is_all_or_nothing():
    buffer = bytearray(b'\xee' * 4)

    with pytest.raises(InsufficientValues):
        pack_into('<2H', buffer, 0, 1)

    with pytest.raises(PackException):
        pack_into('<BBBB', buffer, 0, 1, 2, 3, 256)

    assert buffer == b'\xee' * 4


def test_pack_extra_values_are_ignored():
    assert pack('<B', 1, 2, 3) == b'\x01'


def test_pack_into_buffer_too_small():
    with pytest.raises(BufferTooSmall) as e:
        pack_into('<I', bytearray(3), 0, 1)

    assert e.value.offset == 0
    assert e.value.size == 4
    assert e.value.length == 3

    with pytest.raises(BufferTooSmall):
        pack_into('<H', bytearray(4), 3, 1)

    with pytest.raises(BufferTooSmall):
        pack_into('<H', bytearray(4), -1, 1)


def test_unpack_buffer_too_small():
    with pytest.raises(BufferTooSmall):
        unpack('<I', b'\x00\x00')

    with pytest.raises(BufferTooSmall):
        unpack('<2s 4x', b'ab')

    with pytest.raises(BufferTooSmall):
        unpack_from('<B', b'\x00', 1)


def test_unpack_invalid_utf8():
    with pytest.raises(UnpackException):
        unpack('2s', b'\xff\xfe')


def test_unpack_does_not_modify():
    data = bytearray(b'\x01\x02\x03\x04')

    assert unpack('<I', data) == (0x04030201,)
    assert data == b'\x01\x02\x03\x04'


def test_pack_into_read_only_buffer():
    data = b'\x00' * 4

    with pytest.raises(TypeError):
        pack_into('<I', data, 0, 1)

    with pytest.raises(TypeError):
        pack_into('<I', memoryview(bytearray(4)).toreadonly(), 0, 1)
