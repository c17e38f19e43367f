class FmtpackException(Exception):
    '''Base class to extend in order to throw exception in fmtpack.'''
    pass


class FormatError(FmtpackException):
    '''The descriptor doesn't match the grammar.'''

    def __init__(self, message, descriptor=None, position=None):
        self.descriptor = descriptor
        self.position = position
        if descriptor is not None and position is not None:
            message = f"{message}\n\tIn format '{descriptor}', position {position}\n\t{'-' * (11 + position)}^"
        super().__init__(message)


class UnknownSpecifier(FmtpackException):
    '''The registry has no entry for the character: the grammar and the registry
    must agree so this signals an internal inconsistency.'''

    def __init__(self, specifier):
        self.specifier = specifier
        super().__init__(f"unknown specifier {specifier!r}")


class BufferTooSmall(FmtpackException):

    def __init__(self, offset, size, length):
        self.offset = offset
        self.size = size
        self.length = length
        super().__init__(f'field of {size} byte(s) at offset {offset} exceeds buffer of {length} byte(s)')


class InsufficientValues(FmtpackException):

    def __init__(self, needed, given):
        self.needed = needed
        self.given = given
        super().__init__(f'the format requires at least {needed} value(s), {given} given')


class PackException(FmtpackException):
    '''A value can't be represented by its field.'''
    pass


class UnpackException(FmtpackException):
    '''Raw bytes can't be decoded into a value.'''
    pass


class TruncatedStream(FmtpackException):
    '''The stream ended before the requested amount of bytes.'''

    def __init__(self, requested, available):
        self.requested = requested
        self.available = available
        super().__init__(f'requested {requested} byte(s) but only {available} available')
