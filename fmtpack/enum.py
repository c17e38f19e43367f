from enum import Enum, auto


class Kind(Enum):
    '''It indicates how the value of a field is converted to/from bytes'''
    PAD    = auto()
    CHAR   = auto()
    INT    = auto()
    REAL   = auto()
    STRING = auto()
