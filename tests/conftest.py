"""Pytest configuration and fixtures for test suite."""
import os

import pytest

from utilisation.config_loader import CONFIG_PATH_ENV, config_loader
from utilisation.models.config_data import RunConfig


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep UTILISATION_* variables from the developer's shell out of the tests.

    Reloads the config loader afterwards in case a test pointed it elsewhere.
    """
    for name in list(os.environ):
        if name.startswith("UTILISATION_"):
            monkeypatch.delenv(name)

    yield

    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    config_loader.reload_config()


@pytest.fixture
def write_data(tmp_path):
    """Write a data file with one token per line and return its path."""
    def _write(tokens, name="data.txt"):
        path = tmp_path / name
        path.write_text("".join(f"{token}\n" for token in tokens))
        return path
    return _write


@pytest.fixture
def make_config(tmp_path):
    """Build a RunConfig reading and writing inside tmp_path."""
    def _make(in_file, **kwargs):
        kwargs.setdefault("out_file", str(tmp_path / "results.txt"))
        return RunConfig(in_file=str(in_file), **kwargs)
    return _make
