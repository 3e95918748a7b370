"""
Decodes raw tokens read from the sensor data file into readings.

The logging device writes every character of a reading in reverse order,
decimal point and sign included, so "0.25" is stored as "52.0".

Contract:
- a token is a whitespace-free substring of the input
- in REVERSED mode the whole token is reversed, then parsed
- in STANDARD mode the token is parsed as written
- anything that is not a plain decimal literal raises DecodeError
"""
import math
import re

from utilisation.errors import DecodeError
from utilisation.models.ingestion_mode import IngestionMode

MAX_TOKEN_LENGTH = 63

# Optional sign, digits with at most one point, optional exponent.
# ASCII digits only. Rejects nan/inf, underscores and non-ASCII digits,
# which float() would otherwise accept.
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def reverse_token(token: str) -> str:
    """
    Reverse a token by swapping characters from both ends towards the middle.

    An odd-length token keeps its middle character in place.
    """
    chars = list(token)
    left, right = 0, len(chars) - 1
    while left < right:
        chars[left], chars[right] = chars[right], chars[left]
        left += 1
        right -= 1
    return "".join(chars)


class TokenDecoder:
    """Turns raw tokens into float readings according to an ingestion mode."""

    def __init__(self, mode: IngestionMode = IngestionMode.REVERSED, max_token_length: int = MAX_TOKEN_LENGTH):
        if max_token_length <= 0:
            raise ValueError(f"max_token_length must be positive, got {max_token_length}")
        self.mode = mode
        self.max_token_length = max_token_length

    def decode(self, token: str) -> float:
        """
        Decode one raw token.

        Args:
            token: raw text as found between whitespace in the input

        Returns:
            the reading as a float

        Raises:
            DecodeError: if the token is empty, longer than max_token_length,
                not a decimal literal after reversal, or out of float range
        """
        if not token:
            raise DecodeError("Empty token", token=token)

        if len(token) > self.max_token_length:
            raise DecodeError(
                f"Token of {len(token)} characters exceeds maximum of {self.max_token_length}",
                token=token,
            )

        literal = reverse_token(token) if self.mode is IngestionMode.REVERSED else token

        if not _DECIMAL_LITERAL.fullmatch(literal):
            raise DecodeError(f"Token '{token}' is not a number (read as '{literal}')", token=token)

        value = float(literal)
        if not math.isfinite(value):
            raise DecodeError(f"Token '{token}' is out of range (read as '{literal}')", token=token)
        return value
