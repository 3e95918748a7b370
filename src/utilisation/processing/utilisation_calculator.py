import logging

from utilisation.errors import EmptyInputError
from utilisation.models.sample_store import SampleStore

logger = logging.getLogger(__name__)

# Default trigger level, no knowledge of the physical system behind it
DEFAULT_TRIGGER_LEVEL = 10.0


def count_triggered(samples: SampleStore, trigger_level: float) -> int:
    """Count readings equal to or above the trigger level in a single pass."""
    triggered = 0
    for reading in samples:
        if reading >= trigger_level:
            triggered += 1
    return triggered


def percentage_of(triggered: int, total: int) -> float:
    """Share of triggered readings as a percentage of total."""
    if total == 0:
        raise EmptyInputError("No readings available, utilisation is undefined")
    return 100.0 * (triggered / total)


def calculate_percentage_usage(samples: SampleStore, trigger_level: float = DEFAULT_TRIGGER_LEVEL) -> float:
    """
    Percentage of time the machine is in use, assuming readings are taken at a
    fixed interval. Read-only: the store is left exactly as it was.
    """
    total = samples.size()
    if total == 0:
        raise EmptyInputError("No readings available, utilisation is undefined")
    triggered = count_triggered(samples, trigger_level)
    logger.debug(f"{triggered} of {total} readings at or above {trigger_level}")
    return percentage_of(triggered, total)
