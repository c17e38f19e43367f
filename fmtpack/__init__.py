"""
# fmtpack: fixed binary layouts from a format string.

A descriptor is a compact string, in the spirit of printf(), describing a
sequence of fixed-width binary fields, for example

    "<H 2x 16s d"

that is: little endian, an unsigned short, two pad bytes, a 16 bytes wide
string and a double.

An optional first character selects the byte order

 @  native byte order, fields aligned to their native alignment (default)
 =  native byte order, no alignment
 <  little endian
 >  big endian
 !  network (big endian)

followed by any number of specifiers, each optionally preceded by a count:

 x  pad byte          c  char             s  string (count is the width)
 b  signed char       B  unsigned char
 h  short             H  unsigned short
 i  int               I  unsigned int
 l  long              L  unsigned long
 q  long long         Q  unsigned long long
 f  float             d  double

Three basic operations are defined on a descriptor:

 1. calculate_size(): the number of bytes the fields occupy.

 2. pack(): encode a sequence of values into binary data.

 3. unpack(): decode binary data into the sequence of values.

"""
from .meta import ByteOrder
from .enum import Kind
from .registry import FormatSpec, lookup
from .compiler import (
    FormatToken,
    CompiledFormat,
    compile_format,
    is_valid_descriptor,
)
from .core import (
    calculate_size,
    pack,
    pack_into,
    unpack,
    unpack_from,
)
from .streams import Stream, read_packed, write_packed, iter_unpack
from .layout import FieldLayout, layout, arity
from .exceptions import (
    FmtpackException,
    FormatError,
    UnknownSpecifier,
    BufferTooSmall,
    InsufficientValues,
    PackException,
    UnpackException,
    TruncatedStream,
)
