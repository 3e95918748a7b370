"""
utilisation - estimate how much of the time a machine is in use from a file
of vibration readings that the logging device wrote digit-reversed.

Reads the input file, counts readings at or above the trigger level and
writes the percentage to the output file.

Settings are resolved in order: command line, UTILISATION_* environment
variables, config/utilisation_config.json, built-in defaults.
"""
import argparse
import logging
import sys
from typing import List, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from utilisation.config_loader import config_loader
from utilisation.errors import ExitCode, UtilisationError
from utilisation.models.config_data import RunConfig
from utilisation.models.decode_policy import DecodeErrorPolicy
from utilisation.models.ingestion_mode import IngestionMode
from utilisation.services.utilisation_service import run_utilisation

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def _default(name: str):
    return lambda: getattr(config_loader.get_config(), name)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="UTILISATION_")

    in_file: str = Field(default_factory=_default("in_file"))
    out_file: str = Field(default_factory=_default("out_file"))
    trigger_level: float = Field(default_factory=_default("trigger_level"), allow_inf_nan=False)
    capacity: int = Field(default_factory=_default("capacity"), gt=0)
    max_token_length: int = Field(default_factory=_default("max_token_length"), gt=0)
    ingestion_mode: IngestionMode = Field(default_factory=_default("ingestion_mode"))
    on_decode_error: DecodeErrorPolicy = Field(default_factory=_default("on_decode_error"))
    debug: bool = Field(default_factory=_default("debug"))
    dump_values: bool = Field(default_factory=_default("dump_values"))

    def to_run_config(self) -> RunConfig:
        return RunConfig(
            in_file=self.in_file,
            out_file=self.out_file,
            trigger_level=self.trigger_level,
            capacity=self.capacity,
            max_token_length=self.max_token_length,
            ingestion_mode=self.ingestion_mode,
            on_decode_error=self.on_decode_error,
            debug=self.debug,
            dump_values=self.dump_values,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="utilisation",
        description="Calculate machine utilisation from digit-reversed vibration readings.",
    )
    parser.add_argument("-i", "--input", dest="in_file", help="input data file (default: data.txt)")
    parser.add_argument("-o", "--output", dest="out_file", help="output results file (default: results.txt)")
    parser.add_argument("-t", "--trigger-level", dest="trigger_level", type=float,
                        help="readings at or above this level count as in use (default: 10.0)")
    parser.add_argument("-c", "--capacity", type=int, help="maximum number of readings (default: 255)")
    parser.add_argument("--max-token-length", dest="max_token_length", type=int,
                        help="longest accepted token in characters (default: 63)")
    parser.add_argument("-m", "--mode", dest="ingestion_mode", choices=[m.value for m in IngestionMode],
                        help="how tokens are written in the input file (default: reversed)")
    parser.add_argument("--on-decode-error", dest="on_decode_error", choices=[p.value for p in DecodeErrorPolicy],
                        help="abort the run or skip malformed tokens (default: abort)")
    parser.add_argument("-d", "--debug", action="store_true", default=None, help="enable debug logging")
    parser.add_argument("--dump-values", dest="dump_values", action="store_true", default=None,
                        help="log every decoded reading and the final percentage")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    """Parse command line arguments on top of environment and config file settings."""
    args = build_parser().parse_args(argv)
    overrides = {key: value for key, value in vars(args).items() if value is not None}
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings(argv)
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Invalid settings: {e}")
        return ExitCode.INVALID_SETTINGS

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        report = run_utilisation(settings.to_run_config())
    except UtilisationError as e:
        logger.error(f"Error: {e}")
        return e.exit_code

    logger.info(
        "Utilisation %.6f%% (%d of %d readings >= %s, %d skipped) written to %s",
        report.percentage, report.triggered, report.readings,
        report.trigger_level, report.skipped_tokens, report.output_file,
    )
    return ExitCode.OK


if __name__ == "__main__":
    sys.exit(main())
