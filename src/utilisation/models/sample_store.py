"""
SampleStore: fixed-capacity, append-only storage for decoded readings.
Pre-allocated once, filled in order, never overwritten or wrapped.
"""
from typing import Iterator, List

from utilisation.errors import CapacityExceeded


class SampleStore:
    """
    Fixed-size array of readings with an explicit count.
    - O(1) append at index `count`
    - O(1) random access within [0, count)
    - Refuses writes past capacity instead of overwriting
    """

    __slots__ = ('capacity', 'buffer', 'count')

    def __init__(self, capacity: int = 255):
        """
        Initialize an empty store.

        Args:
            capacity: Maximum number of readings to hold
        """
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.buffer: List[float] = [0.0] * capacity
        self.count = 0  # Number of valid entries (0 to capacity)

    def append(self, value: float) -> None:
        """Store a reading at the next free index. O(1)."""
        if self.count == self.capacity:
            raise CapacityExceeded(self.capacity)
        self.buffer[self.count] = value
        self.count += 1

    def get(self, index: int) -> float:
        """Get the reading at index (0 = first read)."""
        if index < 0 or index >= self.count:
            raise IndexError(f"Index {index} out of range [0, {self.count})")
        return self.buffer[index]

    def get_all(self) -> List[float]:
        """Get all valid readings in insertion order."""
        return self.buffer[:self.count]

    def __iter__(self) -> Iterator[float]:
        for i in range(self.count):
            yield self.buffer[i]

    def __len__(self) -> int:
        return self.count

    def is_full(self) -> bool:
        """Check if store is at capacity."""
        return self.count == self.capacity

    def size(self) -> int:
        """Get number of valid entries."""
        return self.count

    def get_stats(self) -> dict:
        """Get statistics about the store's fill level."""
        return {
            "capacity": self.capacity,
            "current_count": self.count,
            "is_full": self.is_full(),
            "fill": self.count / self.capacity,
        }
