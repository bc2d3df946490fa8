import enum
from typing import Literal


class Access(enum.Enum):
    """Element access granted by an enumeration, fixed when it is built."""

    MUTABLE = enum.auto()
    READONLY = enum.auto()


MUTABLE: Literal[Access.MUTABLE] = Access.MUTABLE
READONLY: Literal[Access.READONLY] = Access.READONLY
