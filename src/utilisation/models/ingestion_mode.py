"""Ingestion mode enumeration for selecting how raw tokens are read."""
from enum import Enum


class IngestionMode(Enum):
    """How a raw token is turned into a parseable literal."""
    STANDARD = "standard"
    REVERSED = "reversed"
