from dataclasses import dataclass

from utilisation.models.decode_policy import DecodeErrorPolicy
from utilisation.models.ingestion_mode import IngestionMode


@dataclass
class RunConfig:
    in_file: str = "data.txt"
    out_file: str = "results.txt"
    # Arbitrary trigger level without knowledge of the physical system
    trigger_level: float = 10.0
    capacity: int = 255
    max_token_length: int = 63
    ingestion_mode: IngestionMode = IngestionMode.REVERSED
    on_decode_error: DecodeErrorPolicy = DecodeErrorPolicy.ABORT
    debug: bool = False
    dump_values: bool = False
