import sys
from enum import Enum


class ByteOrder(Enum):
    """The byte-order marker that can open a descriptor.

    Only NATIVE_ALIGNED pads the fields to their native alignment, the
    native modes resolve the endianness of the host at runtime."""
    NATIVE_ALIGNED = '@'
    NATIVE         = '='
    LITTLE_ENDIAN  = '<'
    BIG_ENDIAN     = '>'
    NETWORK        = '!'

    @property
    def aligned(self) -> bool:
        return self is ByteOrder.NATIVE_ALIGNED

    @property
    def endianness(self) -> str:
        '''Returns "little" or "big", like sys.byteorder'''
        if self in (ByteOrder.NATIVE_ALIGNED, ByteOrder.NATIVE):
            return sys.byteorder
        if self is ByteOrder.LITTLE_ENDIAN:
            return 'little'

        return 'big'

    @property
    def struct_prefix(self) -> str:
        # explicit prefixes only, struct must never add padding on its own
        return '<' if self.endianness == 'little' else '>'


DEFAULT_BYTEORDER = ByteOrder.NATIVE_ALIGNED
