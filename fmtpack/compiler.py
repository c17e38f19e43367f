"""
Translate a descriptor like "<2H 16s q" into a CompiledFormat.

The grammar is

    [@=<>!] (whitespace* digits* specifier whitespace*)*

and the tokens must cover the whole (stripped) descriptor: a stray character
anywhere makes the descriptor invalid instead of being silently skipped.
"""
import logging
import re
from functools import lru_cache
from typing import NamedTuple, Tuple

from .meta import ByteOrder, DEFAULT_BYTEORDER
from .registry import FormatSpec, SPECIFIERS, lookup
from .exceptions import FormatError


logger = logging.getLogger(__name__)

CACHE_SIZE = 256

TOKEN_RE = re.compile(r'\s*([0-9]*)([%s])\s*' % re.escape(SPECIFIERS))


class FormatToken(NamedTuple):
    count: int
    specifier: str

    @property
    def spec(self) -> FormatSpec:
        return lookup(self.specifier)


class CompiledFormat(NamedTuple):
    byteorder: ByteOrder
    tokens: Tuple[FormatToken, ...]
    descriptor: str = ''

    def __str__(self):
        return self.descriptor


def _split_byteorder(descriptor: str):
    if descriptor and descriptor[0] in {_.value for _ in ByteOrder}:
        return ByteOrder(descriptor[0]), 1

    return DEFAULT_BYTEORDER, 0


@lru_cache(maxsize=CACHE_SIZE)
def _compile(descriptor: str) -> CompiledFormat:
    stripped = descriptor.strip()
    byteorder, position = _split_byteorder(stripped)

    tokens = []
    while (match := TOKEN_RE.match(stripped, position)):
        digits, specifier = match.groups()
        count = int(digits) if digits else 1

        if count == 0:
            raise FormatError('the count must be positive', stripped, match.start(1))

        tokens.append(FormatToken(count, specifier))
        position = match.end()

    if position != len(stripped):
        raise FormatError('unexpected character', stripped, position)

    compiled = CompiledFormat(byteorder, tuple(tokens), descriptor)
    logger.debug("compiled '%s' -> %s %s", descriptor, byteorder.name, tokens)

    return compiled


def compile_format(descriptor: str) -> CompiledFormat:
    if not isinstance(descriptor, str):
        raise FormatError(f"descriptor must be a string, not {descriptor.__class__.__name__}")

    return _compile(descriptor)


def ensure_compiled(descriptor) -> CompiledFormat:
    '''Accept both a descriptor and an already compiled one.'''
    if isinstance(descriptor, CompiledFormat):
        return descriptor

    return compile_format(descriptor)


def is_valid_descriptor(descriptor) -> bool:
    try:
        compile_format(descriptor)
    except FormatError:
        return False

    return True
