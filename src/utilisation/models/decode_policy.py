"""Policy applied when a token cannot be decoded."""
from enum import Enum


class DecodeErrorPolicy(Enum):
    """What a run does with a malformed token."""
    ABORT = "abort"
    SKIP = "skip"
