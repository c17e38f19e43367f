#!/usr/bin/env python3
'''
Dump the fields of a binary record described by a format string, like

    $ fmtdump.py '<I 4s H' header.bin
'''
import os
import sys
import logging

from fmtpack import compile_format, unpack, layout
from fmtpack.layout import field_bits
from fmtpack.exceptions import FmtpackException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'usage: {progname} <descriptor> <file> [offset]')
    sys.exit(1)


def dump(descriptor, data, offset=0):
    compiled = compile_format(descriptor)
    # fields are laid out relative to the start of the record
    record = data[offset:]
    values = unpack(compiled, record)

    print(f'Format: {compiled.descriptor.strip()} ({compiled.byteorder.name})')
    print(f' {"Offset":<10} {"Type":<5} {"Raw":<20} {"Value":<24} Bits')
    for field in layout(compiled):
        raw = record[field.offset:field.offset + field.size]
        print(f' 0x{offset + field.offset:08x} {field.specifier:<5} {raw.hex():<20} {values[field.index]!r:<24} {field_bits(raw)}')


def parse_args(argv):
    '''Returns (descriptor, path, offset); the offset accepts the 0x prefix.'''
    if len(argv) not in (3, 4):
        usage(argv[0])

    descriptor, path = argv[1:3]
    offset = 0
    if len(argv) == 4:
        try:
            offset = int(argv[3], 0)
        except ValueError:
            usage(argv[0])

        if offset < 0:
            usage(argv[0])

    return descriptor, path, offset


if __name__ == '__main__':
    descriptor, path, offset = parse_args(sys.argv)

    with open(path, 'rb') as f:
        data = f.read()

    try:
        dump(descriptor, data, offset)
    except FmtpackException as e:
        logger.error(f'failed to dump \'{path}\': {e}')
        sys.exit(1)
