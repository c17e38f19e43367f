import logging
from typing import List, NamedTuple

from .enum import Kind
from .compiler import ensure_compiled
from .core import iter_tokens


logger = logging.getLogger(__name__)


class FieldLayout(NamedTuple):
    offset: int
    size: int
    specifier: str
    index: int


def layout(descriptor) -> List[FieldLayout]:
    """Where each value of the descriptor lives in the packed buffer.

    There is one entry for each value: a repeated scalar like "3H" produces
    three entries while a string like "16s" produces only one; pad bytes
    don't carry values and so they are not listed."""
    compiled = ensure_compiled(descriptor)

    result = []
    for offset, token, spec in iter_tokens(compiled):
        if spec.kind is Kind.PAD:
            continue

        if spec.kind is Kind.STRING:
            result.append(FieldLayout(offset, token.count, token.specifier, len(result)))
            continue

        for idx in range(token.count):
            result.append(FieldLayout(offset + idx * spec.size, spec.size, token.specifier, len(result)))

    return result


def arity(descriptor) -> int:
    '''Number of values packed from or unpacked into.'''
    return len(layout(descriptor))


def field_bits(raw: bytes) -> str:
    from bitstring import Bits

    return Bits(bytes=bytes(raw)).bin
