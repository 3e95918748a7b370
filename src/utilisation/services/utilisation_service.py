import logging

from utilisation.errors import CapacityExceeded, DecodeError
from utilisation.models.config_data import RunConfig
from utilisation.models.decode_policy import DecodeErrorPolicy
from utilisation.models.sample_store import SampleStore
from utilisation.processing.token_decoder import TokenDecoder
from utilisation.processing.utilisation_calculator import calculate_percentage_usage, count_triggered
from utilisation.schemas import UtilisationReport
from utilisation.services.file_handler import iter_tokens, open_input, write_result

logger = logging.getLogger(__name__)


def ingest(config: RunConfig, samples: SampleStore) -> int:
    """
    Decode every token of the input file into samples.

    Returns the number of tokens skipped under DecodeErrorPolicy.SKIP.
    """
    decoder = TokenDecoder(config.ingestion_mode, config.max_token_length)
    skipped = 0

    with open_input(config.in_file) as stream:
        for index, token in enumerate(iter_tokens(stream)):
            try:
                value = decoder.decode(token)
            except DecodeError as e:
                e.index = index
                if config.on_decode_error is DecodeErrorPolicy.ABORT:
                    raise
                logger.warning(f"Skipping malformed token: {e}")
                skipped += 1
                continue

            try:
                samples.append(value)
            except CapacityExceeded as e:
                e.index = index
                raise

    return skipped


def run_utilisation(config: RunConfig) -> UtilisationReport:
    """
    Read the input file, compute the utilisation and write it out.
    The output file is only touched once the percentage is known.
    """
    samples = SampleStore(config.capacity)
    skipped = ingest(config, samples)

    logger.debug(f"Read {samples.size()} values")
    if config.dump_values:
        for i, reading in enumerate(samples):
            logger.info(f"{i}\t{reading:f}")

    percentage = calculate_percentage_usage(samples, config.trigger_level)
    triggered = count_triggered(samples, config.trigger_level)
    if config.dump_values:
        logger.info(f"Percentage Usage: {percentage:f} %")

    write_result(config.out_file, percentage)

    return UtilisationReport(
        input_file=config.in_file,
        output_file=config.out_file,
        trigger_level=config.trigger_level,
        readings=samples.size(),
        triggered=triggered,
        skipped_tokens=skipped,
        percentage=percentage,
    )
