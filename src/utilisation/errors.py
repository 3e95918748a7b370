"""
Error kinds raised by the utilisation pipeline.

Every error carries the process exit code that `main` reports for it, so
scripts calling the tool can tell the failure kinds apart.
"""
from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """Process exit statuses, one per failure kind."""
    OK = 0
    FILE_OPEN = 1
    USAGE = 2  # reserved by argparse
    DECODE = 3
    CAPACITY = 4
    EMPTY_INPUT = 5
    INVALID_SETTINGS = 6
    FAILURE = 7  # any other run failure


class UtilisationError(Exception):
    """Base class for all run-level failures."""
    exit_code = ExitCode.FAILURE


class FileOpenError(UtilisationError, OSError):
    """Input or output file could not be opened."""
    exit_code = ExitCode.FILE_OPEN

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class DecodeError(UtilisationError, ValueError):
    """A token is empty, too long, or not a number once reversed."""
    exit_code = ExitCode.DECODE

    def __init__(self, message: str, token: str = "", index: Optional[int] = None):
        super().__init__(message)
        self.token = token
        self.index = index

    def __str__(self) -> str:
        if self.index is None:
            return self.args[0]
        return f"{self.args[0]} (token #{self.index})"


class CapacityExceeded(UtilisationError, OverflowError):
    """More readings than the sample store can hold."""
    exit_code = ExitCode.CAPACITY

    def __init__(self, capacity: int, index: Optional[int] = None):
        super().__init__(f"Sample store capacity of {capacity} readings exceeded")
        self.capacity = capacity
        self.index = index

    def __str__(self) -> str:
        if self.index is None:
            return self.args[0]
        return f"{self.args[0]} at token #{self.index}"


class EmptyInputError(UtilisationError, ValueError):
    """No valid readings were collected, so no percentage exists."""
    exit_code = ExitCode.EMPTY_INPUT
