from enum import Enum


class Status(Enum):
    """Loop continuation signal returned by every command handler"""
    CONTINUE = 1
    STOP = 0
